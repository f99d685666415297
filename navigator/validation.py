"""Structured-output validation.

Every response from the completion service passes through :func:`validate`
before anything downstream trusts it. Validation never raises for bad data;
it returns a :class:`ValidationResult` that is either ``ok`` with a value or
carries the list of field errors.
"""

import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import AfterValidator, AnyUrl, BaseModel, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_url_adapter = TypeAdapter(AnyUrl)


def is_absolute_url(value: Any) -> bool:
    """True when ``value`` is a non-blank string that parses as an absolute URL."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def _check_absolute_url(value: str) -> str:
    if not is_absolute_url(value):
        raise ValueError("must be an absolute URL")
    # Keep the caller's string; AnyUrl would normalize it (trailing slashes etc).
    return value


AbsoluteUrl = Annotated[str, AfterValidator(_check_absolute_url)]


@dataclass(frozen=True)
class FieldError:
    field: str
    constraint: str
    message: str


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    value: Optional[ModelT] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def failed_fields(self) -> set[str]:
        return {e.field for e in self.errors}


def _field_errors(exc: ValidationError) -> list[FieldError]:
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        errors.append(FieldError(field=loc, constraint=err.get("type", "invalid"), message=err.get("msg", "")))
    return errors


def validate(model: type[ModelT], raw: Any) -> ValidationResult[ModelT]:
    """Validate ``raw`` against ``model`` and return a tagged result."""
    if raw is None:
        return ValidationResult(errors=[FieldError(field="<root>", constraint="missing", message="no output")])
    if isinstance(raw, model):
        return ValidationResult(value=raw)
    try:
        return ValidationResult(value=model.model_validate(raw))
    except ValidationError as exc:
        errors = _field_errors(exc)
        logger.debug("Validation against %s failed: %s", model.__name__, errors)
        return ValidationResult(errors=errors)
