"""
Config file loader.

The config is a JSON object mapping each split-DNS domain to an ordered
list of nameserver references:

    {
        "example.com": ["svc:my-gateway"],
        "internal.example.com": ["192.168.1.1", "device:my-router"]
    }
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..exceptions import ConfigError
from ..models import SplitDNSConfig

logger = logging.getLogger(__name__)


def load_config(path: Union[str, Path]) -> SplitDNSConfig:
    """
    Read and parse the split-DNS config file.

    Args:
        path: Path to the JSON config file

    Returns:
        Mapping of domain -> list of nameserver reference strings

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON,
            or is not an object of string -> array of strings
    """
    try:
        data = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"reading config file: {e}") from e

    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"parsing config JSON: {e}") from e

    config = _validate_shape(raw)
    logger.info(f"Loaded config from {path} with {len(config)} domain(s)")
    return config


def _validate_shape(raw) -> SplitDNSConfig:
    """Check the decoded JSON is an object of string -> array of strings"""
    if not isinstance(raw, dict):
        raise ConfigError(
            f"parsing config JSON: expected an object, got {type(raw).__name__}"
        )

    config: SplitDNSConfig = {}
    for domain, nameservers in raw.items():
        if not isinstance(nameservers, list):
            raise ConfigError(
                f"parsing config JSON: nameservers for {domain!r} must be an array"
            )
        for ns in nameservers:
            if not isinstance(ns, str):
                raise ConfigError(
                    f"parsing config JSON: nameserver {ns!r} for {domain!r} must be a string"
                )
        config[domain] = list(nameservers)

    return config
