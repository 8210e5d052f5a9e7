"""Structured parse results for the data-contract schemas.

``validate`` is the non-raising entry point: callers at a boundary get a
``ValidationResult`` back and decide for themselves whether to reject, log or
``unwrap()`` it.
"""
import logging
from typing import Any, Generic, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from yachtquote.core.errors import SchemaValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class FieldError(BaseModel):
    loc: Tuple[Any, ...]
    message: str
    type: str


class ValidationResult(BaseModel, Generic[M]):
    schema_name: str
    success: bool
    data: Optional[M] = None
    errors: Tuple[FieldError, ...] = ()

    def unwrap(self) -> M:
        if not self.success:
            raise SchemaValidationError(self.schema_name, self.errors)
        return self.data


def validate(model: Type[M], data: Any) -> ValidationResult[M]:
    try:
        parsed = model.model_validate(data)
    except ValidationError as e:
        errors = tuple(
            FieldError(loc=tuple(err["loc"]), message=err["msg"], type=err["type"])
            for err in e.errors()
        )
        logger.debug(f"{model.__name__} rejected with {len(errors)} error(s)")
        return ValidationResult[model](schema_name=model.__name__, success=False, errors=errors)
    return ValidationResult[model](schema_name=model.__name__, success=True, data=parsed)
