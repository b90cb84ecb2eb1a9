# noise_generator/errors.py

"""Exceptions raised by the noise generators."""


class InvalidParameterError(ValueError):
    """
    Raised at construction time when a generator is configured with values
    that would only produce degenerate output (zero octaves, a non-positive
    frequency, a missing strategy, an unknown name).
    """
