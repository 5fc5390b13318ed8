"""Runtime settings loaded from the environment (and a .env file if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str = field(
        default_factory=lambda: os.getenv("BR_VALIDATORS_LOG_LEVEL", "WARNING").upper()
    )
    dominio_empresa: str = field(
        default_factory=lambda: os.getenv("BR_VALIDATORS_DOMINIO_EMPRESA", "empresa.com")
    )


settings = Settings()
