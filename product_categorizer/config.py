# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - StoreConfig (dataclass)
#     backend: str       (default "file")  → "file" or "memory"
#     storage_dir: str   (default "metadata/")
#     slot_key: str      (default "learnedCategories")
#
# - ClassifierConfig (dataclass)
#     allow_relabel: bool           (default False)
#     auto_select_threshold: float  (default 0.7)
#     min_suggest_length: int       (default 3)
#
# - LoggingConfig (dataclass)
#     level: str   (default "INFO")
#     json: bool   (default False)
#
# - AppConfig (dataclass)
#     store: StoreConfig
#     classifier: ClassifierConfig
#     logging: LoggingConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton so the next get_config() re-reads the environment.
#
# - configure_logging(config: LoggingConfig) -> None
#     Set up structlog rendering (console or JSON).
#
# USAGE:
# ------
#   from product_categorizer.config import get_config
#   config = get_config()
#   print(config.store.storage_dir)
#   print(config.classifier.allow_relabel)
#
# ==============================================

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv


STORE_BACKENDS = ("file", "memory")
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class StoreConfig:
    """Where the learned table is persisted."""
    backend: str = "file"
    storage_dir: str = "metadata/"
    slot_key: str = "learnedCategories"

    def __post_init__(self):
        if self.backend not in STORE_BACKENDS:
            raise ValueError(
                f"Unknown store backend {self.backend!r}, expected one of {STORE_BACKENDS}"
            )
        if not self.slot_key:
            raise ValueError("slot_key must not be empty")


@dataclass
class ClassifierConfig:
    """Knobs for the classifier engine and the suggestion session."""
    allow_relabel: bool = False
    auto_select_threshold: float = 0.7
    min_suggest_length: int = 3

    def __post_init__(self):
        if not 0.0 <= self.auto_select_threshold <= 1.0:
            raise ValueError("auto_select_threshold must be within [0, 1]")
        if self.min_suggest_length < 0:
            raise ValueError("min_suggest_length must not be negative")


@dataclass
class LoggingConfig:
    """structlog output settings."""
    level: str = "INFO"
    json: bool = False


@dataclass
class AppConfig:
    """Main application configuration."""
    store: StoreConfig = field(default_factory=StoreConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    store_config = StoreConfig(
        backend=os.getenv("CATEGORIZER_STORE_BACKEND", "file").strip().lower(),
        storage_dir=os.getenv("CATEGORIZER_STORAGE_DIR", "metadata/"),
        slot_key=os.getenv("CATEGORIZER_SLOT_KEY", "learnedCategories"),
    )

    classifier_config = ClassifierConfig(
        allow_relabel=_env_bool("CATEGORIZER_ALLOW_RELABEL", False),
        auto_select_threshold=float(os.getenv("CATEGORIZER_AUTO_SELECT_THRESHOLD", "0.7")),
        min_suggest_length=int(os.getenv("CATEGORIZER_MIN_SUGGEST_LENGTH", "3")),
    )

    logging_config = LoggingConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        json=_env_bool("LOG_JSON", False),
    )

    _config_instance = AppConfig(
        store=store_config,
        classifier=classifier_config,
        logging=logging_config,
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration (used by tests and the CLI)."""
    global _config_instance
    _config_instance = None


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure structlog for console or JSON output.

    Args:
        config: Logging settings; defaults to the loaded AppConfig's.
    """
    config = config or get_config().logging
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
