class InvalidParameter(ValueError):
    """A sweep bound, step or sample bound is out of range."""


class InvalidTrialCount(ValueError):
    """The number of trials per point is not positive."""
