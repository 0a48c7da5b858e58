"""
Centralized Configuration Module

Application constants, environment-backed defaults and logging configuration.
Import from here instead of hardcoding values.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# ============================================================================
# Load default .env at module import time
# ============================================================================
load_dotenv()

# ============================================================================
# Environment Loading
# ============================================================================

def load_environment(env_file: Optional[str] = None):
    """
    Load environment variables from .env file.

    Args:
        env_file: Optional path to .env file. If None, uses default .env
    """
    if env_file:
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logging.getLogger(__name__).info(f"Loaded environment from: {env_file}")
        else:
            logging.getLogger(__name__).warning(f"Environment file not found: {env_file}")
    else:
        load_dotenv(override=True)


# ============================================================================
# Application Constants
# ============================================================================

class AppConfig:
    """Application-wide constants"""

    APP_NAME = "Tailscale Split DNS Sync"
    APP_VERSION = "1.0.0"
    APP_DESCRIPTION = "Resolve svc:/device: nameserver references and push them to Tailscale split DNS"

    DEFAULT_CONFIG_PATH = "/config.json"
    DEFAULT_OUTPUT_FORMAT = "list"


class TailscaleConfig:
    """
    Tailscale API settings.

    Values are read from the environment on every call so that a
    later --env-file load is picked up.
    """

    DEFAULT_BASE_URL = "https://api.tailscale.com"
    DEFAULT_TAILNET = "-"

    API_PREFIX = "/api/v2"
    OAUTH_TOKEN_PATH = "/api/v2/oauth/token"

    @classmethod
    def tailnet(cls) -> str:
        return os.getenv("TAILSCALE_TAILNET", cls.DEFAULT_TAILNET)

    @classmethod
    def base_url(cls) -> str:
        return os.getenv("TAILSCALE_BASE_URL", cls.DEFAULT_BASE_URL)

    @classmethod
    def api_key(cls) -> str:
        return os.getenv("TAILSCALE_API_KEY", "")

    @classmethod
    def client_id(cls) -> str:
        return os.getenv("TAILSCALE_CLIENT_ID", "")

    @classmethod
    def client_secret(cls) -> str:
        return os.getenv("TAILSCALE_CLIENT_SECRET", "")

    @classmethod
    def api_timeout(cls) -> Optional[float]:
        """Per-request timeout in seconds, or None for no timeout"""
        value = os.getenv("TAILSCALE_API_TIMEOUT", "")
        return float(value) if value else None


class SyncConfig:
    """Sync loop settings"""

    @classmethod
    def config_path(cls) -> str:
        return os.getenv("SPLITDNS_CONFIG", AppConfig.DEFAULT_CONFIG_PATH)

    @classmethod
    def interval(cls) -> str:
        """Raw interval string; parsed by parsers.duration_parser"""
        return os.getenv("SPLITDNS_INTERVAL", "0")


# ============================================================================
# Logging Configuration
# ============================================================================

class LogConfig:
    """Logging configuration"""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # Detailed format with file/line
    DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

    LOG_FILE_MAX_BYTES = int(os.getenv("LOG_FILE_MAX_BYTES", "10485760"))  # 10MB
    LOG_FILE_BACKUP_COUNT = int(os.getenv("LOG_FILE_BACKUP_COUNT", "5"))

    # Read on use so values from --env-file apply
    @classmethod
    def log_level(cls) -> str:
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def log_file(cls) -> Optional[str]:
        return os.getenv("LOG_FILE")


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    Configure application logging.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional log file path
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, LogConfig.log_level(), logging.INFO)

    log_format = LogConfig.DETAILED_FORMAT if verbose else LogConfig.LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=LogConfig.LOG_DATE_FORMAT
    )

    file_path = log_file or LogConfig.log_file()
    if file_path:
        from logging.handlers import RotatingFileHandler

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LogConfig.LOG_FILE_MAX_BYTES,
            backupCount=LogConfig.LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, LogConfig.LOG_DATE_FORMAT))
        logging.getLogger().addHandler(file_handler)
        logger.info(f"Logging to file: {file_path}")

    # Suppress noisy loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger.debug(f"Logging configured: level={logging.getLevelName(log_level)}")


logger = logging.getLogger(__name__)


__all__ = [
    'AppConfig',
    'TailscaleConfig',
    'SyncConfig',
    'LogConfig',
    'load_environment',
    'setup_logging',
]
