"""Runtime settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "GROWTH_CALC_"
EXTENSION_KEY = "growth_calc"

DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)

LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """App-wide configuration, read once when the app is built."""

    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    currency: str = "CAD"
    currency_symbol: str = "CA$"
    date_pattern: str = "{month}/{day}/{year}"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.currency.strip():
            raise ValueError("currency must not be empty")
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
            logging.CRITICAL,
        ):
            raise ValueError(f"unknown log level {self.log_level!r}")
        try:
            self.date_pattern.format(year=2000, month=1, day=1, mm="01", dd="01")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"invalid date pattern {self.date_pattern!r}") from exc

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ

        def read(name: str) -> Optional[str]:
            value = environ.get(ENV_PREFIX + name)
            return value if value else None

        overrides = {}
        origins = read("CORS_ORIGINS")
        if origins:
            overrides["cors_origins"] = tuple(
                origin.strip() for origin in origins.split(",") if origin.strip()
            )
        for name, attr in (
            ("CURRENCY", "currency"),
            ("CURRENCY_SYMBOL", "currency_symbol"),
            ("DATE_PATTERN", "date_pattern"),
            ("LOG_LEVEL", "log_level"),
        ):
            value = read(name)
            if value is not None:
                overrides[attr] = value
        return cls(**overrides)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
