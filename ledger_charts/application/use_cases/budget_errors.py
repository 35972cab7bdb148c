"""Errors raised by the available budget use cases."""


class AvailableBudgetNotFoundError(LookupError):
    """Raised when an available budget id does not exist."""

    def __init__(self, budget_id: int) -> None:
        super().__init__(f"Available budget {budget_id} not found")
        self.budget_id = budget_id


class InvalidBudgetUpdateError(ValueError):
    """Raised when a submitted budget change fails validation.

    Attributes:
        field: Name of the offending submission field.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


__all__ = ["AvailableBudgetNotFoundError", "InvalidBudgetUpdateError"]
