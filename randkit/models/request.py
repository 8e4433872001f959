from enum import Enum
from typing import Optional

import numpy as np
from pydantic import BaseModel, model_validator

from randkit.utils.rng import Sampler

INT64 = np.iinfo(np.int64)


class Distribution(str, Enum):
    uniform = "uniform"
    probability = "probability"
    uniformf = "uniformf"
    probabilityf = "probabilityf"
    yes_no = "yes-no"
    normal = "normal"
    triangular = "triangular"


class SampleRequest(BaseModel):
    '''
    One named distribution together with its arguments.

    low/high are the bounds for uniform draws and the limits of the
    triangular distribution, mode is its peak.
    '''
    distribution: Distribution
    low: Optional[float] = None
    high: Optional[float] = None
    mean: float = 0.0
    stddev: float = 1.0
    mode: Optional[float] = None

    @model_validator(mode="after")
    def check_arguments(self):
        if self.distribution in (Distribution.uniform, Distribution.uniformf):
            if self.low is not None and self.high is None:
                raise ValueError("--low requires --high")
        if self.distribution == Distribution.uniform:
            for bound in (self.low, self.high):
                if bound is not None and not float(bound).is_integer():
                    raise ValueError("uniform bounds must be integers")
                if bound is not None and not INT64.min <= bound <= INT64.max:
                    raise ValueError(f"uniform bounds must lie within [{INT64.min}, {INT64.max}]")
            low = self.low if self.low is not None else 0
            if self.high is not None and low > self.high:
                raise ValueError("uniform lower bound is greater than upper bound")
        if self.distribution == Distribution.uniformf:
            low = self.low if self.low is not None else 0.0
            if self.high is not None and low > self.high:
                raise ValueError("uniformf lower bound is greater than upper bound")
        if self.distribution == Distribution.normal and self.stddev < 0:
            raise ValueError("stddev must be non-negative")
        if self.distribution == Distribution.triangular:
            if self.low is None or self.high is None or self.mode is None:
                raise ValueError("triangular requires --low, --high and --mode")
            if not self.low < self.high:
                raise ValueError("triangular requires low < high")
            if not self.low <= self.mode <= self.high:
                raise ValueError("triangular mode must lie within [low, high]")
        return self

    def draw(self, sampler: Sampler, generator: Optional[np.random.Generator] = None):
        return _DRAWS[self.distribution](self, sampler, generator)

    def _draw_uniform(self, sampler: Sampler, generator):
        if self.high is None:
            return sampler.uniform(generator=generator)
        if self.low is None:
            return sampler.uniform(int(self.high), generator=generator)
        return sampler.uniform(int(self.low), int(self.high), generator=generator)

    def _draw_uniformf(self, sampler: Sampler, generator):
        if self.high is None:
            return sampler.uniformf(generator=generator)
        if self.low is None:
            return sampler.uniformf(self.high, generator=generator)
        return sampler.uniformf(self.low, self.high, generator=generator)


_DRAWS = {
    Distribution.uniform: SampleRequest._draw_uniform,
    Distribution.probability: lambda req, sampler, gen: sampler.probability(generator=gen),
    Distribution.uniformf: SampleRequest._draw_uniformf,
    Distribution.probabilityf: lambda req, sampler, gen: sampler.probabilityf(generator=gen),
    Distribution.yes_no: lambda req, sampler, gen: sampler.yes_no(generator=gen),
    Distribution.normal: lambda req, sampler, gen: sampler.normalf(req.mean, req.stddev, generator=gen),
    Distribution.triangular: lambda req, sampler, gen: sampler.triangularf(
        req.low, req.high, req.mode, generator=gen),
}
