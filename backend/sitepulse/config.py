from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./sitepulse.db"
    SECRET_KEY: str = "vickhardth-site-pulse-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 8
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL: str = "INFO"
    DEFAULT_CASUAL_LEAVES: int = 12
    DEFAULT_SICK_LEAVES: int = 12

    class Config:
        env_file = ".env"

settings = Settings()
