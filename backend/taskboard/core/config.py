from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Taskboard API"
    ENV: str = "development"
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    BASE_URL: str = "http://localhost:3000"

    # DB
    DATABASE_URL: str = "sqlite:///./data/taskboard.db"

    LOG_LEVEL: str = "DEBUG"

    # Overdue task sweep, fires on */30 * * * *
    RECONCILE_ENABLED: bool = True
    RECONCILE_INTERVAL_MINUTES: int = 30

    class Config:
        env_file = ".env"

settings = Settings()
