from ads_online.models.user import User

from conftest import count_rows

REGISTER_BODY = {
    "username": "seller@mail.ru",
    "password": "password123",
    "firstName": "Anna",
    "lastName": "Smirnova",
    "phone": "+7 (912) 345-67-89",
    "role": "USER",
}

def test_register_creates_user(client):
    response = client.post("/register", json=REGISTER_BODY)
    assert response.status_code == 201
    assert count_rows(User) == 1

    login = client.post("/login", json={"username": "seller@mail.ru", "password": "password123"})
    assert login.status_code == 200

def test_register_rejects_duplicate_username(client):
    client.post("/register", json=REGISTER_BODY)

    response = client.post("/register", json={**REGISTER_BODY, "phone": "+79120000000"})
    assert response.status_code == 400
    assert response.json()["status"] == 400
    assert count_rows(User) == 1

def test_register_rejects_duplicate_phone(client):
    client.post("/register", json=REGISTER_BODY)

    response = client.post("/register", json={**REGISTER_BODY, "username": "another@mail.ru"})
    assert response.status_code == 400

def test_register_validates_body(client):
    response = client.post("/register", json={**REGISTER_BODY, "password": "short", "phone": "12345"})
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert "password" in body["message"]
    assert "phone" in body["message"]

def test_login_with_wrong_password(client, user):
    response = client.post("/login", json={"username": user["username"], "password": "wrongpass1"})
    assert response.status_code == 401
    assert response.content == b""

def test_login_with_unknown_user(client):
    response = client.post("/login", json={"username": "nobody@mail.ru", "password": "password123"})
    assert response.status_code == 401

def test_protected_route_without_credentials(client):
    response = client.get("/users/me")
    assert response.status_code == 401
    assert response.content == b""
    assert response.headers["www-authenticate"] == "Basic"

def test_protected_route_with_bad_credentials(client, user):
    response = client.get("/users/me", auth=(user["username"], "not-the-password"))
    assert response.status_code == 401
    assert response.content == b""

def test_responses_carry_correlation_id(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.headers["x-correlation-id"]

def test_register_rejects_same_phone_in_another_format(client):
    client.post("/register", json=REGISTER_BODY)

    response = client.post(
        "/register",
        json={**REGISTER_BODY, "username": "another@mail.ru", "phone": "+79123456789"},
    )
    assert response.status_code == 400
    assert count_rows(User) == 1

def test_register_stores_canonical_phone(client):
    client.post("/register", json={**REGISTER_BODY, "phone": "+7912 345-6789"})

    me = client.get("/users/me", auth=("seller@mail.ru", "password123")).json()
    assert me["phone"] == "+7 (912) 345-67-89"

def test_register_with_admin_role(client):
    # the role field is honoured on self-registration
    client.post("/register", json={**REGISTER_BODY, "role": "ADMIN"})

    me = client.get("/users/me", auth=("seller@mail.ru", "password123")).json()
    assert me["role"] == "ADMIN"
