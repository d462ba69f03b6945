"""Exception and warning types raised by hitchroma."""


class HitChromaError(Exception):
    """Base class for every error raised by hitchroma."""


class ConfigurationError(HitChromaError, ValueError):
    """A palette and a set of gradient steps do not line up.

    This is a programming or configuration mistake, not bad data, so the
    render that triggered it should be aborted.
    """


class RangeOrderWarning(UserWarning):
    """A score range is unordered (``min > max``) or holds negative values."""
