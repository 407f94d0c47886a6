import os
from typing import List, Optional

# Basic settings helper to read environment configuration.

ALL_SERVICES = ("adverts", "advertisers", "auth", "loans", "medias", "stocks", "users")


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: str | None, default: tuple) -> List[str]:
    if not val:
        return list(default)
    return [item.strip().lower() for item in val.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
        self.SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO"), False)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ENABLED_SERVICES: List[str] = _as_list(os.getenv("ENABLED_SERVICES"), ALL_SERVICES)


settings = Settings()
