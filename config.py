import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    min_token_len: int = 2
    jd_top_k: int = 200
    resume_top_k: int = 400
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    """Read settings from the environment (and .env, if present)."""
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        min_token_len=_int_env("MIN_TOKEN_LEN", 2),
        jd_top_k=_int_env("JD_TOP_K", 200),
        resume_top_k=_int_env("RESUME_TOP_K", 400),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", 8000),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
