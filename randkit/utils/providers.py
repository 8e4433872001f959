"""
Generator providers.

A provider owns one lazily built ``numpy.random.Generator`` for the life of
the process and lends it to the sampler on every draw.

Two streams exist:

* the fast stream, auto-seeded from OS entropy on first use;
* the server stream, which its owner must seed before the first draw.
"""
import threading
from typing import Optional

import numpy as np

from randkit.models.config import BIT_GENERATORS, SamplerConfig
from randkit.models.custom_errors import UnseededGeneratorError
from randkit.utils import entropy_seed
from randkit.utils.logger import get_module_logger

logger = get_module_logger(__name__)


def make_generator(seed: Optional[int] = None, bit_generator: str = "PCG64") -> np.random.Generator:
    '''
    Build a caller-owned generator. Use a fixed seed for repeatable draws.
    '''
    if bit_generator not in BIT_GENERATORS:
        raise ValueError(f"Unknown bit generator '{bit_generator}'")
    return np.random.Generator(BIT_GENERATORS[bit_generator](np.random.SeedSequence(seed)))


class GeneratorProvider:
    name: str = "generic"
    # Whether a missing seed may be drawn from OS entropy
    auto_seed: bool = True

    def __init__(self, bit_generator: str = "PCG64", seed: Optional[int] = None):
        self._lock = threading.Lock()
        self._bit_generator = bit_generator
        self._seed = seed
        self._generator: Optional[np.random.Generator] = None

    def __repr__(self):
        return f"{type(self).__name__}(bit_generator={self._bit_generator!r}, seeded={self.is_seeded})"

    @property
    def bit_generator(self) -> str:
        return self._bit_generator

    @property
    def is_seeded(self) -> bool:
        return self._seed is not None

    @property
    def seed_value(self) -> Optional[int]:
        """Seed the current stream was built from, entropy included"""
        return self._seed

    def generator(self) -> np.random.Generator:
        generator = self._generator
        if generator is not None:
            return generator
        with self._lock:
            if self._generator is None:
                self._generator = self.__build()
            return self._generator

    def seed(self, value: int):
        '''
        Replace the stream with a fresh one built from value.
        '''
        if value < 0:
            raise ValueError("Seed must be a non-negative integer")
        with self._lock:
            self._seed = value
            self._generator = make_generator(value, self._bit_generator)
        logger.debug("Seeded %s stream with %d", self.name, value)

    def configure(self, bit_generator: Optional[str] = None, seed: Optional[int] = None):
        with self._lock:
            if bit_generator is not None:
                if bit_generator not in BIT_GENERATORS:
                    raise ValueError(f"Unknown bit generator '{bit_generator}'")
                self._bit_generator = bit_generator
            if seed is not None:
                self._seed = seed
            elif self.auto_seed:
                self._seed = None
            # Rebuilt lazily with the new settings
            self._generator = None
        logger.debug("Configured %r", self)

    def reset(self, forget_seed: bool = False):
        '''
        Drop stream state. Auto-seeded streams pick a new seed on next use,
        other streams restart from their seed unless forget_seed is set.
        '''
        with self._lock:
            self._generator = None
            if self.auto_seed or forget_seed:
                self._seed = None

    def __build(self) -> np.random.Generator:
        if self._seed is None:
            if not self.auto_seed:
                logger.error("%s stream used before it was seeded", self.name)
                raise UnseededGeneratorError(
                    f"The {self.name} random stream must be seeded before use"
                )
            self._seed = entropy_seed()
            logger.debug("Auto-seeded %s stream from OS entropy: %d", self.name, self._seed)
        logger.debug("Building %s stream on %s", self.name, self._bit_generator)
        return make_generator(self._seed, self._bit_generator)


class FastProvider(GeneratorProvider):
    name = "fast"
    auto_seed = True

    def __init__(self, bit_generator: str = "MT19937", seed: Optional[int] = None):
        super().__init__(bit_generator, seed)


class ServerProvider(GeneratorProvider):
    name = "server"
    auto_seed = False

    def __init__(self, bit_generator: str = "PCG64", seed: Optional[int] = None):
        super().__init__(bit_generator, seed)


fast_provider = FastProvider()
server_provider = ServerProvider()


def configure(config: SamplerConfig):
    '''
    Apply a config to the process-wide fast and server streams.
    '''
    fast_provider.configure(config.fast_bit_generator, config.fast_seed)
    server_provider.configure(config.server_bit_generator, config.server_seed)
