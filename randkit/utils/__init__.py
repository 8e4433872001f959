import os
from typing import Dict, Iterable, Optional

import numpy as np

from randkit.models.custom_errors import ConfigError
from randkit.utils.logger import get_module_logger

logger = get_module_logger(__name__)


def entropy_seed() -> int:
    '''
    Read a fresh seed from the operating system entropy pool.
    '''
    return int(np.random.SeedSequence().entropy)


def parse_params(params: Optional[Iterable[str]]) -> Dict[str, str]:
    '''
    Parse command line overrides given in key=value format.
    '''
    result = {}
    for item in params or []:
        if "=" not in item:
            raise ConfigError(f"Invalid parameter '{item}', expected key=value format")
        key, value = item.split("=", 1)
        key = key.strip()
        if key == "":
            raise ConfigError(f"Invalid parameter '{item}', key is empty")
        result[key] = value.strip()
    logger.debug("Parsed parameters: %s", result)
    return result


def env_value(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    if value == "":
        return None
    return value
