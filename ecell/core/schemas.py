from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON em camelCase (registrationLink, isFeatured...), atributos em snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,   # aceita também os nomes snake_case
        from_attributes=True,
        str_strip_whitespace=True,
    )


class InputModel(CamelModel):
    # campos opcionais enviados como "" (formulários) viram None
    BLANK_TO_NONE: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def blank_strings_to_none(cls, value: Any, info) -> Any:
        if info.field_name in cls.BLANK_TO_NONE and isinstance(value, str) and not value.strip():
            return None
        return value

    def reject_nulls(self, *names: str) -> None:
        """Campos obrigatórios no banco não podem ser zerados num update parcial."""
        for name in names:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")


class SuccessOut(CamelModel):
    success: bool = True
    message: Optional[str] = None
