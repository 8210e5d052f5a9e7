"""Exceptions raised by the quoting layer"""
from typing import Sequence


class QuoteError(ValueError):
    pass


class InvalidQuoteInput(QuoteError):

    def __init__(self, field: str, value, reason: str = "must be a finite number"):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field} {reason}, got {value!r}")


class SchemaValidationError(ValueError):

    def __init__(self, model_name: str, errors: Sequence):
        self.model_name = model_name
        self.errors = tuple(errors)
        details = "; ".join(f"{'.'.join(str(p) for p in e.loc)}: {e.message}" for e in self.errors)
        super().__init__(f"{model_name} validation failed: {details}")
