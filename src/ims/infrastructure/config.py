"""Runtime configuration and logging setup.

Settings come from environment variables so the same code runs from the
CLI, tests and any other front end without a config file.
"""

from __future__ import annotations

import logging
import logging.config
import os
from dataclasses import dataclass
from pathlib import Path

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULT_DATA_DIR = _PROJECT_ROOT / "data"
DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from ``IMS_*`` environment variables."""
    env = os.environ if environ is None else environ

    data_dir = Path(env.get("IMS_DATA_DIR") or DEFAULT_DATA_DIR)

    raw_threshold = env.get("IMS_LOW_STOCK_THRESHOLD")
    threshold = DEFAULT_LOW_STOCK_THRESHOLD
    if raw_threshold:
        try:
            threshold = int(raw_threshold)
        except ValueError as exc:
            raise ValidationError(
                f"IMS_LOW_STOCK_THRESHOLD must be an integer, got {raw_threshold!r}"
            ) from exc
        if threshold < 0:
            raise ValidationError("IMS_LOW_STOCK_THRESHOLD cannot be negative")

    log_level = (env.get("IMS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValidationError(f"Unknown log level: {log_level!r}")

    return Settings(
        data_dir=data_dir,
        low_stock_threshold=threshold,
        currency_symbol=env.get("IMS_CURRENCY_SYMBOL") or DEFAULT_CURRENCY_SYMBOL,
        log_level=log_level,
    )


# --- Logging ------------------------------------------------------------------

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "ims": {
            "handlers": ["console"],
            "level": DEFAULT_LOG_LEVEL,
            "propagate": False,
        },
    },
}


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    ims_logger = {**LOGGING_CONFIG["loggers"]["ims"], "level": level}
    config = {**LOGGING_CONFIG, "loggers": {"ims": ims_logger}}
    logging.config.dictConfig(config)
