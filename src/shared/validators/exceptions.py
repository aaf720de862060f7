"""Validation failure raised by the field validators."""

from .rules import ValidationRule


class InvalidInputError(ValueError):
    """Raised when a raw input value fails a field validator.

    Subclasses ``ValueError`` so the validators can be called directly from
    pydantic field validators.

    Attributes:
        field: Human-readable label of the rejected field
        rule: The rule that was violated
        message: User-facing description of the failure

    """

    def __init__(self, field: str, rule: ValidationRule, message: str):
        super().__init__(message)
        self.field = field
        self.rule = rule
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Serialize the failure for an error response body."""
        return {"detail": self.message, "field": self.field, "rule": self.rule.value}
