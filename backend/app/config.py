from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_env: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_allowed_origins: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"


# Istanza globale usata in tutto il progetto
settings = Settings()
