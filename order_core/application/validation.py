"""Input validation at the application boundary."""

from typing import Any, Dict, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from order_core.domain.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_or_raise(schema: Type[ModelT], data: Union[ModelT, Mapping[str, Any], None]) -> ModelT:
    """
    Parse ``data`` into ``schema``.

    Args:
        schema: Input DTO class
        data: An instance of ``schema`` (returned as is) or a mapping

    Returns:
        Validated DTO

    Raises:
        ValidationError: With ``details["errors"]`` mapping each field path
            to its messages
    """
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()

    try:
        return schema.model_validate(data if data is not None else {})
    except PydanticValidationError as exc:
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            path = ".".join(str(part) for part in error["loc"]) or "__root__"
            errors.setdefault(path, []).append(error["msg"])
        raise ValidationError("Validation failed", {"errors": errors}) from exc
