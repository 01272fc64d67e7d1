"""Global configuration: constants, environment profiles, and settings loading."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Languages every clause is expected to carry
SUPPORTED_LANGUAGES = ("en", "ms")
DEFAULT_LANGUAGE = "en"

# Building use groups accepted in a specification
BUILDING_TYPES = (
    "residential",
    "commercial",
    "industrial",
    "institutional",
    "mixed-use",
    "assembly",
)

# Version tag of the embedded clause corpus
CORPUS_VERSION = "UBBL-1984-A2021.1"

# Height at which high-rise fire provisions start to apply (metres)
HIGH_RISE_HEIGHT_M = 18.0

# Score deducted per violation, by severity
DEFAULT_SEVERITY_WEIGHTS: dict[str, float] = {
    "critical": 15.0,
    "major": 8.0,
    "minor": 3.0,
}

# Days a generated report stays valid
DEFAULT_REPORT_VALIDITY_DAYS = 90
MAX_REPORT_VALIDITY_DAYS = 3650

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "UBBL_ENV": {"default": "development", "description": "Environment profile"},
    "UBBL_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
    "UBBL_CHECK_DB": {"default": ":memory:", "description": "Compliance check database path"},
    "UBBL_CORPUS_PATH": {"default": "", "description": "Clause corpus JSON (empty = embedded)"},
    "UBBL_EXPLAINER_PATH": {"default": "", "description": "Explainer JSON (empty = embedded)"},
    "UBBL_WEIGHT_CRITICAL": {"default": "15", "description": "Score weight of a critical violation"},
    "UBBL_WEIGHT_MAJOR": {"default": "8", "description": "Score weight of a major violation"},
    "UBBL_WEIGHT_MINOR": {"default": "3", "description": "Score weight of a minor violation"},
    "UBBL_REPORT_VALIDITY_DAYS": {"default": "90", "description": "Report validity period in days"},
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "UBBL_ENV": "development",
        "UBBL_LOG_LEVEL": "DEBUG",
    },
    "production": {
        "UBBL_ENV": "production",
        "UBBL_LOG_LEVEL": "WARNING",
        "UBBL_CHECK_DB": "ubbl_checks.db",
    },
    "testing": {
        "UBBL_ENV": "testing",
        "UBBL_LOG_LEVEL": "DEBUG",
        "UBBL_CHECK_DB": ":memory:",
    },
}


def load_config(project_path: str | Path = ".") -> dict[str, str]:
    """Load merged config: defaults -> profile -> config.json -> .env -> env vars.

    Returns a flat dict of configuration values.
    """
    root = Path(project_path)
    config: dict[str, str] = {}

    # 1. Defaults
    for key, info in _CONFIG_KEYS.items():
        config[key] = str(info["default"])

    # 2. Profile overrides
    env_name = os.environ.get("UBBL_ENV", config["UBBL_ENV"])
    config.update(_PROFILES.get(env_name, {}))

    # 3. .ubbl/config.json
    config_json = root / ".ubbl" / "config.json"
    if config_json.is_file():
        try:
            data = json.loads(config_json.read_text(encoding="utf-8"))
            for k, v in data.items():
                config[k] = str(v)
        except (json.JSONDecodeError, OSError):
            logger.debug("Could not read config.json", exc_info=True)

    # 4. .env file
    env_file = root / ".env"
    if env_file.is_file():
        try:
            for line in env_file.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" in line:
                    k, v = line.split("=", 1)
                    config[k.strip()] = v.strip()
        except OSError:
            logger.debug("Could not read .env", exc_info=True)

    # 5. Environment variables override all
    for key in _CONFIG_KEYS:
        env_val = os.environ.get(key)
        if env_val is not None:
            config[key] = env_val

    return config


def severity_weights(config: dict[str, str]) -> dict[str, float]:
    """Extract the per-severity score weights from a loaded config."""
    weights = dict(DEFAULT_SEVERITY_WEIGHTS)
    for severity in weights:
        raw = config.get(f"UBBL_WEIGHT_{severity.upper()}")
        if raw is None or raw == "":
            continue
        try:
            weights[severity] = float(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric weight for %s: %r", severity, raw)
    return weights


def report_validity_days(config: dict[str, str]) -> int:
    """Return the configured report validity period in days.

    Non-numeric values fall back to the default.  Values are clamped to
    ``[0, MAX_REPORT_VALIDITY_DAYS]``; zero means reports never expire.
    """
    raw = config.get("UBBL_REPORT_VALIDITY_DAYS", "")
    try:
        days = int(raw)
    except ValueError:
        return DEFAULT_REPORT_VALIDITY_DAYS
    if days < 0:
        logger.warning("Negative report validity %d; reports will not expire", days)
        return 0
    if days > MAX_REPORT_VALIDITY_DAYS:
        logger.warning("Report validity %d exceeds %d days; capping", days, MAX_REPORT_VALIDITY_DAYS)
        return MAX_REPORT_VALIDITY_DAYS
    return days


def configure_logging(config: dict[str, str] | None = None) -> None:
    """Apply ``UBBL_LOG_LEVEL`` to the package logger."""
    level_name = (config or load_config()).get("UBBL_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.getLogger("ubbl").setLevel(level)
