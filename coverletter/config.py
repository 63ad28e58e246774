from __future__ import annotations

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger("uvicorn.error")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using %s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using %s", name, raw, default)
        return default


# -------- Settings --------
@dataclass
class Settings:
    openai_api_key: Optional[str] = None
    enable_llm: bool = False
    openai_model: str = "gpt-4o-mini"
    timeout: float = 30.0
    max_tokens: int = 500
    temperature: float = 0.4
    prompt_variant: str = "professional"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def use_llm(self) -> bool:
        return bool(self.openai_api_key) and self.enable_llm


def get_settings() -> Settings:
    """Read settings from the environment (and .env, loaded on import)."""
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        enable_llm=os.getenv("ENABLE_LLM", "0") == "1",
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        timeout=_env_float("OPENAI_TIMEOUT", 30.0),
        max_tokens=_env_int("OPENAI_MAX_TOKENS", 500),
        temperature=_env_float("OPENAI_TEMPERATURE", 0.4),
        prompt_variant=os.getenv("PROMPT_VARIANT", "professional"),
        cors_origins=origins or ["*"],
    )
