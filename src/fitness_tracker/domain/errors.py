"""Domain errors raised by the services."""


class InvalidFoodDefinition(ValueError):
    """Raised when a food profile cannot be used for scaling."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class InvalidQuantity(ValueError):
    """Raised when a logged quantity is not a positive number."""

    def __init__(self) -> None:
        super().__init__("invalid quantity")


class InvalidProfile(ValueError):
    """Raised when profile inputs are missing or out of range."""


class InvalidWeight(ValueError):
    """Raised when a body weight sample is not positive."""


class InvalidWorkoutTemplate(ValueError):
    """Raised when an exercise or workout template cannot be created."""


class InvalidSetField(ValueError):
    """Raised when a set update names a field that cannot be edited."""
