"""Errors raised by point_struct."""


class PointError(Exception):
    """Base class for point errors."""


class InvalidFormatError(PointError, ValueError):
    """Text could not be parsed as a point."""


class InvalidArgumentError(PointError, ValueError):
    """An argument is outside its accepted range."""


class NullArgumentError(PointError, TypeError):
    """A required argument was None."""
