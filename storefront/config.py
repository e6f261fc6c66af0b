from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../storefront repo
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        raise RuntimeError(f"{keys[0]} must be an integer, got {v!r}")


def _get_bool(*keys: str, default: bool = False) -> bool:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return v.lower() in ("1", "true", "yes", "on")


def _get_path(*keys: str, default: str) -> str:
    v = _get_env(*keys, default=default)
    return str(v)


@dataclass(frozen=True)
class Settings:
    db_path: str
    currency: str
    decimals: int
    host: str
    port: int
    api_url: str
    seed_catalog: bool
    log_level: str


settings = Settings(
    db_path=_get_path("CART_DB_PATH", "DB_PATH", default=str(ROOT_DIR / "data" / "carts.db")),
    currency=_get_env("CURRENCY", default="USD") or "USD",
    decimals=_get_int("DECIMALS", default=2),
    host=_get_env("HOST", default="127.0.0.1") or "127.0.0.1",
    port=_get_int("PORT", default=5000),
    api_url=_get_env("STOREFRONT_API_URL", default="http://127.0.0.1:5000") or "http://127.0.0.1:5000",
    seed_catalog=_get_bool("SEED_CATALOG", default=True),
    log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
)
