from ads_online.models.comment import Comment

from conftest import count_rows

def test_list_comments_of_missing_ad(client, user):
    response = client.get("/ads/999/comments", auth=user["auth"])
    assert response.status_code == 404
    assert response.json()["status"] == 404

def test_list_comments_requires_auth(client, user, make_ad):
    ad = make_ad(user)
    assert client.get(f"/ads/{ad['pk']}/comments").status_code == 401

def test_create_and_list_comments(client, user, other_user, make_ad, make_comment):
    ad = make_ad(user)
    created = make_comment(other_user, ad["pk"], text="Can you lower the price?")
    assert created["author"] == other_user["id"]
    assert created["authorFirstName"] == "Ivan"
    assert created["authorImage"] is None
    assert created["text"] == "Can you lower the price?"
    assert created["createdAt"] > 0

    response = client.get(f"/ads/{ad['pk']}/comments", auth=user["auth"])
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert data["results"][0]["pk"] == created["pk"]

def test_list_comments_of_ad_without_comments(client, user, make_ad):
    ad = make_ad(user)
    response = client.get(f"/ads/{ad['pk']}/comments", auth=user["auth"])
    assert response.status_code == 200
    assert response.json() == {"count": 0, "results": []}

def test_create_comment_on_missing_ad(client, user):
    response = client.post("/ads/999/comments", json={"text": "Is it still available?"}, auth=user["auth"])
    assert response.status_code == 404
    assert count_rows(Comment) == 0

def test_create_comment_with_invalid_text(client, user, make_ad):
    ad = make_ad(user)
    response = client.post(f"/ads/{ad['pk']}/comments", json={"text": "short"}, auth=user["auth"])
    assert response.status_code == 400
    assert count_rows(Comment) == 0

def test_update_comment_by_author(client, user, other_user, make_ad, make_comment):
    ad = make_ad(user)
    comment = make_comment(other_user, ad["pk"])

    response = client.patch(
        f"/ads/{ad['pk']}/comments/{comment['pk']}",
        json={"text": "Sorry, already bought one"},
        auth=other_user["auth"],
    )
    assert response.status_code == 200
    assert response.json()["text"] == "Sorry, already bought one"
    assert response.json()["createdAt"] == comment["createdAt"]

def test_update_comment_by_ad_owner_is_forbidden(client, user, other_user, make_ad, make_comment):
    # owning the ad does not grant rights on other people's comments
    ad = make_ad(user)
    comment = make_comment(other_user, ad["pk"])

    response = client.patch(
        f"/ads/{ad['pk']}/comments/{comment['pk']}",
        json={"text": "Edited by someone else"},
        auth=user["auth"],
    )
    assert response.status_code == 403

    comments = client.get(f"/ads/{ad['pk']}/comments", auth=user["auth"]).json()
    assert comments["results"][0]["text"] == comment["text"]

def test_update_comment_by_admin(client, user, admin, make_ad, make_comment):
    ad = make_ad(user)
    comment = make_comment(user, ad["pk"])

    response = client.patch(
        f"/ads/{ad['pk']}/comments/{comment['pk']}",
        json={"text": "Moderated by admin"},
        auth=admin["auth"],
    )
    assert response.status_code == 200
    assert response.json()["author"] == user["id"]

def test_delete_comment_by_author(client, user, make_ad, make_comment):
    ad = make_ad(user)
    comment = make_comment(user, ad["pk"])

    response = client.delete(f"/ads/{ad['pk']}/comments/{comment['pk']}", auth=user["auth"])
    assert response.status_code == 204
    assert count_rows(Comment) == 0

def test_delete_comment_by_other_user_is_forbidden(client, user, other_user, make_ad, make_comment):
    ad = make_ad(user)
    comment = make_comment(user, ad["pk"])

    response = client.delete(f"/ads/{ad['pk']}/comments/{comment['pk']}", auth=other_user["auth"])
    assert response.status_code == 403
    assert count_rows(Comment) == 1

def test_delete_comment_by_admin(client, user, admin, make_ad, make_comment):
    ad = make_ad(user)
    comment = make_comment(user, ad["pk"])

    response = client.delete(f"/ads/{ad['pk']}/comments/{comment['pk']}", auth=admin["auth"])
    assert response.status_code == 204
    assert count_rows(Comment) == 0

def test_comment_addressed_through_another_ad(client, user, other_user, make_ad, make_comment):
    ad = make_ad(user)
    foreign_ad = make_ad(other_user)
    comment = make_comment(user, ad["pk"])

    # even the author cannot reach the comment through the wrong ad
    patch = client.patch(
        f"/ads/{foreign_ad['pk']}/comments/{comment['pk']}",
        json={"text": "Edited through wrong ad"},
        auth=user["auth"],
    )
    assert patch.status_code == 404

    # a non-owner gets 404 as well, not 403
    delete = client.delete(f"/ads/{foreign_ad['pk']}/comments/{comment['pk']}", auth=other_user["auth"])
    assert delete.status_code == 404
    assert count_rows(Comment) == 1

def test_missing_comment(client, user, make_ad):
    ad = make_ad(user)

    response = client.patch(
        f"/ads/{ad['pk']}/comments/999",
        json={"text": "Nothing to edit here"},
        auth=user["auth"],
    )
    assert response.status_code == 404
    assert client.delete(f"/ads/{ad['pk']}/comments/999", auth=user["auth"]).status_code == 404

def test_comment_with_invalid_ids(client, user):
    assert client.delete("/ads/1/comments/abc", auth=user["auth"]).status_code == 400
    assert client.get("/ads/0/comments", auth=user["auth"]).status_code == 400
