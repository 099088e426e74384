"""Logging bootstrap for the panel service.

Two files are written: ``panel-runtime.log`` gets everything, and
``panel-output.log`` keeps only the lines the light, display and power tube
emit, as a transcript of what the panel showed.
"""
from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path
from typing import Any, Dict, Optional

OUTPUT_LOGGER = "microwave.devices.output"
RUNTIME_LOG = "panel-runtime.log"
OUTPUT_LOG = "panel-output.log"


def _rotating_file(path: Path, formatter: str, level: str, retention_days: int) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.TimedRotatingFileHandler",
        "formatter": formatter,
        "level": level,
        "filename": str(path),
        "when": "midnight",
        "backupCount": max(int(retention_days), 1),
        "utc": True,
        "delay": True,
        "encoding": "utf-8",
    }


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None, retention_days: int = 14) -> None:
    if log_dir is None:
        log_dir = Path(__file__).resolve().parents[2] / "logs"
    log_dir = Path(log_dir).expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                },
                "panel": {
                    "format": "%(asctime)s | %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": level,
                },
                "runtime_file": _rotating_file(log_dir / RUNTIME_LOG, "default", level, retention_days),
                # Device lines are always recorded, whatever the runtime level.
                "output_file": _rotating_file(log_dir / OUTPUT_LOG, "panel", "INFO", retention_days),
            },
            "loggers": {
                OUTPUT_LOGGER: {"level": "INFO", "handlers": ["output_file"], "propagate": True},
            },
            "root": {"level": level, "handlers": ["console", "runtime_file"]},
        }
    )


__all__ = ["configure_logging", "OUTPUT_LOGGER", "OUTPUT_LOG", "RUNTIME_LOG"]
