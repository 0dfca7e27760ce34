# ABOUTME: Shared pydantic base for record shapes built from loosely-typed input.
# ABOUTME: Coerces numeric values in text fields and replaces explicit nulls with field defaults.

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class RecordModel(BaseModel):
    """Immutable record that reads numbers as text and replaces None with defaults."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return value
