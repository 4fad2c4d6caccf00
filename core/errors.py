class LocalizationError(Exception):
    """Base class for subscriber localization errors"""


class InsufficientDataError(LocalizationError, ValueError):
    """No measurements were supplied, so no position can be produced"""


class DegenerateCirclesError(LocalizationError, ValueError):
    """Two distance circles share a centre and have no usable intersection"""


class MeasurementParseError(LocalizationError, ValueError):
    """Measurement input could not be decoded"""
