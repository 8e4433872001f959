import os
from typing import Iterable, Optional

import yaml

from randkit.models.config import SamplerConfig
from randkit.models.custom_errors import ConfigError
from randkit.utils import parse_params
from randkit.utils.logger import get_module_logger

logger = get_module_logger(__name__)


def read_config_from_file(path: Optional[str], params: Optional[Iterable[str]] = None) -> SamplerConfig:
    '''
    Read sampler config from a YAML (or JSON) file and apply key=value overrides.

    Without a path, the environment is used as the base config.
    Raises pydantic.ValidationError when the merged values are invalid.
    '''
    if path is None or path == "":
        data = SamplerConfig.from_env().model_dump(exclude_unset=True)
    else:
        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as error:
            raise ConfigError(f"Unable to parse config file {path}: {error}") from error
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

    overrides = parse_params(params)
    for key in overrides:
        if key not in SamplerConfig.model_fields:
            raise ConfigError(f"Unknown config parameter '{key}'")
    data.update(overrides)

    logger.debug("Sampler config: %s", data)
    return SamplerConfig(**data)
