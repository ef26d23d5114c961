from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# HS256 keys shorter than this are rejected at startup
MIN_JWT_KEY_BYTES = 16


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    JWT_PRIVATE_KEY: SecretStr = SecretStr("yardtrack-dev-signing-key-change-me")
    JWT_ISSUER: str = "yardtrack-api"
    JWT_AUDIENCE: str = "yardtrack-clients"
    JWT_EXPIRATION_HOURS: int = 2
    JWT_LEEWAY_SECONDS: int = 60

    @field_validator("JWT_PRIVATE_KEY")
    @classmethod
    def validate_key_length(cls, value: SecretStr) -> SecretStr:
        if len(value.get_secret_value().encode("utf-8")) < MIN_JWT_KEY_BYTES:
            raise ValueError(
                f"JWT_PRIVATE_KEY must be at least {MIN_JWT_KEY_BYTES} bytes long"
            )
        return value
