import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    database_url: str = Field("mongodb://localhost:27017", description="MongoDB connection string")
    database_name: str = Field("storefront", description="Database holding the storefront collections")
    admin_key: str = Field("luxury-admin-2026", description="Shared secret expected in X-Admin-Key")
    seed_catalog: bool = Field(True, description="Insert the seed catalog when products is empty")
    log_level: str = Field("INFO")
    port: int = Field(8000)


def get_settings() -> Settings:
    """Read settings from the environment (and .env, if present)."""
    env = {}
    if os.getenv("DATABASE_URL"):
        env["database_url"] = os.getenv("DATABASE_URL")
    if os.getenv("DATABASE_NAME"):
        env["database_name"] = os.getenv("DATABASE_NAME")
    if os.getenv("ADMIN_KEY"):
        env["admin_key"] = os.getenv("ADMIN_KEY")
    if os.getenv("SEED_CATALOG") is not None:
        env["seed_catalog"] = _flag(os.getenv("SEED_CATALOG"))
    if os.getenv("LOG_LEVEL"):
        env["log_level"] = os.getenv("LOG_LEVEL").upper()
    if os.getenv("PORT"):
        env["port"] = int(os.getenv("PORT"))
    return Settings(**env)
