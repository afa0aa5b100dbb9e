from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "FT_", "env_file": ".env", "env_file_encoding": "utf-8"}

    jwt_secret: str = Field(min_length=32)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expire_minutes: int = Field(default=10080)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)
    db_path: str = Field(default="finance_tracker.db")
    cors_origins: str = Field(default="http://localhost:3000")

    aggregation_timeout_seconds: float = Field(default=10.0, gt=0)
    list_default_limit: int = Field(default=50, ge=1, le=500)

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
