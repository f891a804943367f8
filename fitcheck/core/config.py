# fitcheck/core/config.py
import os

from pydantic import BaseModel, Field

def _default_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    data_dir = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    os.makedirs(data_dir, exist_ok=True)
    return f"sqlite:///{os.path.join(data_dir, 'fitcheck.db')}"

class Settings(BaseModel):
    DATABASE_URL: str = Field(default_factory=_default_database_url)
    SECRET_KEY: str = Field(default_factory=lambda: os.getenv("SECRET_KEY", "CHANGE_ME_SUPER_SECRET"))
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30")))
    # fuso usado para o "dia de calendário" (check-in diário, resumos, histograma)
    TIMEZONE: str = Field(default_factory=lambda: os.getenv("TIMEZONE", "America/Sao_Paulo"))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    SEED_ADMIN_ID: str = Field(default_factory=lambda: os.getenv("SEED_ADMIN_ID", "admin"))

settings = Settings()
