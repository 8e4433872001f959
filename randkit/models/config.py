from typing import Optional

import numpy as np
from pydantic import BaseModel, field_validator

from randkit.utils import env_value

# Bit generators a stream can be built on
BIT_GENERATORS = {
    "MT19937": np.random.MT19937,
    "PCG64": np.random.PCG64,
    "PCG64DXSM": np.random.PCG64DXSM,
    "Philox": np.random.Philox,
    "SFC64": np.random.SFC64,
}

ENV_PREFIX = "RANDKIT_"


class SamplerConfig(BaseModel):
    '''
    Settings for the fast and server random streams.

    The fast stream is auto-seeded from OS entropy unless `fast_seed` pins it.
    The server stream has no fallback: it must be seeded either here or by its
    owner before the first draw.
    '''
    fast_bit_generator: str = "MT19937"
    server_bit_generator: str = "PCG64"
    fast_seed: Optional[int] = None
    server_seed: Optional[int] = None

    @field_validator("fast_bit_generator", "server_bit_generator")
    @classmethod
    def check_bit_generator(cls, value: str) -> str:
        if value not in BIT_GENERATORS:
            raise ValueError(
                f"Unknown bit generator '{value}', choose one of {', '.join(BIT_GENERATORS)}"
            )
        return value

    @field_validator("fast_seed", "server_seed")
    @classmethod
    def check_seed(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("Seed must be a non-negative integer")
        return value

    @classmethod
    def from_env(cls) -> "SamplerConfig":
        """Build config from RANDKIT_* environment variables"""
        data = {}
        for field in cls.model_fields:
            value = env_value(ENV_PREFIX + field.upper())
            if value is not None:
                data[field] = value
        return cls(**data)
