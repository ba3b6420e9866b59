from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field, model_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "Recipe Sharing API"
    VERSION: str = "1.0.0"
    APP_PORT: int = 8001
    LOG_LEVEL: str = "INFO"

    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    DATABASE_URL: str = ""
    DB_NAME: str = ""
    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_HOST: str = "postgres"
    DB_INTERNAL_PORT: int = 5432
    DB_ECHO: bool = False

    JWT_SECRET_KEY: str = ""
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 100
    INGREDIENT_CREATE_ATTEMPTS: int = 3

    @model_validator(mode="after")
    def check_required_field_are_set(self):
        missing_fields = []
        if not self.DATABASE_URL:
            if not self.DB_NAME:
                missing_fields.append("DB_NAME")
            if not self.DB_USER:
                missing_fields.append("DB_USER")
            if not self.DB_PASSWORD:
                missing_fields.append("DB_PASSWORD")
        if not self.JWT_SECRET_KEY:
            missing_fields.append("JWT_SECRET_KEY")

        if missing_fields:
            raise ValueError(
                f"Missing required environment variables: {','.join(missing_fields)}"
            )

        return self

    @computed_field
    @property
    def ASYNC_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}@"
            f"{self.DB_HOST}:{self.DB_INTERNAL_PORT}/{self.DB_NAME}"
        )


settings = Settings()
