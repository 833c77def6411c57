# ads_online/config.py
from pydantic_settings import BaseSettings
from pydantic import field_validator

class Settings(BaseSettings):
    """Environment settings"""

    # API
    app_name: str = "Ads Online API"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./ads_online.db"

    # Images
    image_max_size: int = 10 * 1024 * 1024  # 10MB

    # Passwords
    bcrypt_rounds: int = 12

    # CORS (comma separated)
    cors_origins: str = "http://localhost:3000"

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"

    @field_validator('image_max_size')
    def validate_image_max_size(cls, v):
        if v <= 0:
            raise ValueError('IMAGE_MAX_SIZE must be positive')
        return v

    @field_validator('bcrypt_rounds')
    def validate_bcrypt_rounds(cls, v):
        if not 4 <= v <= 31:
            raise ValueError('BCRYPT_ROUNDS must be between 4 and 31')
        return v

    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = False

# singleton
settings = Settings()
