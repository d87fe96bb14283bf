"""Selection-specific exceptions for precondition violations."""


class SelectionError(Exception):
    """Base exception for selection ratio operations."""

    pass


class InvalidSelectionParamsError(SelectionError, ValueError):
    """Raised when selection parameters violate their documented ranges."""

    pass


class InvalidCurveError(SelectionError, ValueError):
    """Raised when a curve is requested with a non-positive width or bad curvature."""

    pass


class InvalidLayoutError(SelectionError, ValueError):
    """Raised when a list layout has a non-positive viewport or item height."""

    pass
