import math
from collections.abc import Sequence
from itertools import islice
from typing import Any, Collection, MutableSequence, Optional, TypeVar

import numpy as np

from randkit.models.custom_errors import (
    EmptyCollectionError,
    InvalidWeightsError,
    SamplingError,
    WeightsMismatchError,
)
from randkit.utils.providers import GeneratorProvider, fast_provider, server_provider

T = TypeVar('T')


def _element_at(collection: Collection[T], offset: int) -> T:
    # Indexable containers are O(1), anything else is walked to the offset
    if isinstance(collection, (Sequence, np.ndarray)):
        return collection[offset]
    for item in islice(collection, offset, None):
        return item
    raise SamplingError(f"Offset {offset} is past the end of the collection")


class Sampler:
    '''
    Draws values from the generator lent by a provider.

    Every operation takes an optional keyword-only ``generator``; pass a
    caller-owned ``numpy.random.Generator`` to keep a stream isolated from
    the shared one.
    '''

    def __init__(self, provider: GeneratorProvider):
        self.provider = provider

    def __repr__(self):
        return f"Sampler({self.provider!r})"

    def generator(self) -> np.random.Generator:
        return self.provider.generator()

    def _resolve(self, generator: Optional[np.random.Generator]) -> np.random.Generator:
        if generator is None:
            return self.provider.generator()
        return generator

    def uniform(self, a: Optional[int] = None, b: Optional[int] = None, *,
                dtype=np.int64, generator: Optional[np.random.Generator] = None) -> int:
        """
        uniform()      -> any value representable by dtype
        uniform(to)    -> integer in [0, to]
        uniform(a, b)  -> integer in [a, b]
        """
        generator = self._resolve(generator)
        if a is None:
            if b is not None:
                raise TypeError("uniform() got an upper bound without a lower bound")
            info = np.iinfo(dtype)
            return int(generator.integers(info.min, info.max, dtype=dtype, endpoint=True))
        if b is None:
            low, high = 0, a
        else:
            low, high = a, b
        return int(generator.integers(low, high, dtype=dtype, endpoint=True))

    def probability(self, *, generator: Optional[np.random.Generator] = None) -> int:
        """Percentage roll in [0, 100]"""
        return self.uniform(0, 100, generator=generator)

    def uniformf(self, a: Optional[float] = None, b: Optional[float] = None, *,
                 generator: Optional[np.random.Generator] = None) -> float:
        """
        uniformf()      -> float in (0, 1]
        uniformf(to)    -> float in [0, to]
        uniformf(a, b)  -> float in [a, b]
        """
        generator = self._resolve(generator)
        if a is None:
            if b is not None:
                raise TypeError("uniformf() got an upper bound without a lower bound")
            # random() covers [0, 1), flip it onto (0, 1]
            return 1.0 - float(generator.random())
        if b is None:
            low, high = 0.0, a
        else:
            low, high = a, b
        return self.__closed_uniform(low, high, generator)

    def probabilityf(self, *, generator: Optional[np.random.Generator] = None) -> float:
        """Probability in [0, 1], both ends included"""
        return self.uniformf(0.0, 1.0, generator=generator)

    def yes_no(self, *, generator: Optional[np.random.Generator] = None) -> bool:
        return bool(self.uniform(0, 1, generator=generator))

    def normalf(self, mean: float, stddev: float, *,
                generator: Optional[np.random.Generator] = None) -> float:
        generator = self._resolve(generator)
        return float(generator.normal(mean, stddev))

    def triangularf(self, a: float, b: float, c: float, *,
                    generator: Optional[np.random.Generator] = None) -> float:
        '''
        Triangular distribution with lower limit a, upper limit b and mode c.

        Uses inverse transform sampling, see
        https://en.wikipedia.org/wiki/Triangular_distribution#Generating_triangular-distributed_random_variates
        Requires a <= c <= b and a < b.
        '''
        u = self.uniformf(generator=generator)
        f = (c - a) / (b - a)

        if u < f:
            return a + math.sqrt(u * (b - a) * (c - a))
        return b - math.sqrt((1 - u) * (b - a) * (b - c))

    def uniform_from(self, collection: Collection[T], *,
                     generator: Optional[np.random.Generator] = None) -> T:
        """Return a random element from the given non-empty collection."""
        if len(collection) == 0:
            raise EmptyCollectionError("Cannot pick an element from an empty collection")

        offset = self.uniform(len(collection) - 1, generator=generator)
        return _element_at(collection, offset)

    def weighted_from(self, weights, collection: Collection[T], *,
                      generator: Optional[np.random.Generator] = None) -> T:
        '''
        Return an element picked with probability proportional to the
        matching entry of weights. Weights are normalized, they need not sum to 1.
        '''
        weights = np.asarray(weights, dtype=float)
        if weights.ndim != 1 or len(weights) != len(collection):
            raise WeightsMismatchError(
                f"Got {weights.size} weights for a collection of {len(collection)} elements"
            )
        if len(collection) == 0:
            raise EmptyCollectionError("Cannot pick an element from an empty collection")
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise InvalidWeightsError("Weights must be finite and non-negative")
        if not np.any(weights > 0):
            raise InvalidWeightsError("Weights must not all be zero")
        # Scale to the largest weight first so the sum cannot overflow
        weights = weights / weights.max()

        generator = self._resolve(generator)
        offset = int(generator.choice(len(weights), p=weights / weights.sum()))
        return _element_at(collection, offset)

    def shuffle(self, sequence: MutableSequence[Any], first: int = 0, last: Optional[int] = None, *,
                generator: Optional[np.random.Generator] = None):
        '''
        Shuffle sequence[first:last] in place.
        '''
        generator = self._resolve(generator)
        if last is None:
            last = len(sequence)

        if isinstance(sequence, np.ndarray):
            # Slices of arrays are views, numpy shuffles them in place
            generator.shuffle(sequence[first:last])
            return

        # Fisher-Yates, walking down from the end of the range
        for i in range(last - 1, first, -1):
            j = int(generator.integers(first, i, endpoint=True))
            sequence[i], sequence[j] = sequence[j], sequence[i]

    @staticmethod
    def __closed_uniform(low: float, high: float, generator: np.random.Generator) -> float:
        # Widen to the next float above high so high itself can be drawn
        value = float(generator.uniform(low, np.nextafter(high, np.inf)))
        return min(value, high)


rng = Sampler(fast_provider)
server_rng = Sampler(server_provider)
