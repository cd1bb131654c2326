from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

class Settings(BaseSettings):
    app_name: str = "Document Management System"
    app_env: str = Field("dev", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # no default: tokens are only as trustworthy as this key
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(120, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    auth_header: str = Field("x-auth-token", alias="AUTH_HEADER")

    password_schemes: list[str] = Field(["bcrypt_sha256", "bcrypt"], alias="PASSWORD_SCHEMES")
    reset_token_expire_minutes: int = Field(60, alias="RESET_TOKEN_EXPIRE_MINUTES")

    database_url: str | None = Field(default=None, alias="DATABASE_URL")

    class Config:
        env_file = ".env"
        extra = "ignore"

    @field_validator("secret_key")
    @classmethod
    def _secret_key_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("SECRET_KEY must not be empty")
        return value

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() in ("prod", "production")

settings = Settings()
