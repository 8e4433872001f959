class SamplingError(Exception):
    pass

class UnseededGeneratorError(SamplingError):
    """
    Exception raised when a stream that requires an explicit seed is used
    before its owner seeded it.
    """
    pass

class EmptyCollectionError(SamplingError, ValueError):
    pass

class WeightsMismatchError(SamplingError, ValueError):
    """
    Exception raised when weights and collection differ in size.
    """
    pass

class InvalidWeightsError(SamplingError, ValueError):
    pass

class ConfigError(SamplingError):
    """
    Exception raised when sampler configuration cannot be read or parsed.
    """
    pass
