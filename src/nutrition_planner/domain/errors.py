"""Domain errors for the nutrition planner."""


class InvalidProfileError(ValueError):
    """Raised when a user profile carries values the formulas cannot use."""


class InvalidActivityError(ValueError):
    """Raised when a day or week of activities breaks its invariants."""


class UnknownFoodError(KeyError):
    """Raised when a food name is not present in the food table."""
