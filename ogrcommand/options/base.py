"""Common behaviour of the per-command option schemas.

An option set is a pydantic model with a closed set of fields. Each field
is one option slot of the external tool, declared with its kind (switch,
text, number, enumeration, compound value, repeated map or list) and its
"unset" default. Fields carry the GDAL spelling of the option as alias,
so an option can be addressed either way:

    >>> from ogrcommand.options.ogr2ogr import ConversionOptions
    >>> options = ConversionOptions()
    >>> options.set("nln", "roads")
    >>> options.get("layer_name")
    'roads'

Assignments are validated strictly: unknown names raise
UnknownOptionError and values of the wrong kind raise OptionTypeError.
Range checks on domain-restricted slots are left to the serializer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

import pydantic

from ogrcommand.options.errors import OptionTypeError, UnknownOptionError

if TYPE_CHECKING:
    from collections.abc import Mapping


def _describe(exc: pydantic.ValidationError) -> str:
    return "; ".join(error["msg"] for error in exc.errors())


class OptionSet(pydantic.BaseModel):
    """Base model for the option schema of one command family."""

    model_config = pydantic.ConfigDict(
        extra="forbid",
        strict=True,
        validate_assignment=True,
        validate_by_name=True,
        validate_by_alias=True,
    )

    @classmethod
    def resolve(cls, name: str) -> str:
        """Map an attribute name or GDAL alias to the field name.

        Raises:
            UnknownOptionError: if no field answers to ``name``.
        """
        fields = cls.model_fields
        if name in fields:
            return name
        for field_name, info in fields.items():
            if info.alias == name:
                return field_name

        raise UnknownOptionError(name, cls.__name__)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        """Build an option set from loosely typed (e.g. JSON) input.

        Enumeration members may be given by value and compound values as
        mappings of their fields.

        Raises:
            UnknownOptionError: if the mapping contains an unknown name.
            OptionTypeError: if a value cannot be converted to its slot.
        """
        try:
            return cls.model_validate(dict(mapping), strict=False)
        except pydantic.ValidationError as exc:
            errors = exc.errors()
            for error in errors:
                if error["type"] == "extra_forbidden":
                    raise UnknownOptionError(
                        str(error["loc"][0]), cls.__name__
                    ) from exc
            first = errors[0]
            raise OptionTypeError(
                str(first["loc"][0]) if first["loc"] else "",
                first.get("input"),
                first["msg"],
            ) from exc

    def get(self, name: str) -> Any:
        return getattr(self, self.resolve(name))

    def set(self, name: str, value: Any) -> None:
        """Assign an option by attribute name or alias.

        Raises:
            UnknownOptionError: if ``name`` is not part of the schema.
            OptionTypeError: if ``value`` does not match the slot's kind.
        """
        field_name = self.resolve(name)
        try:
            setattr(self, field_name, value)
        except pydantic.ValidationError as exc:
            raise OptionTypeError(name, value, _describe(exc)) from exc

    def is_set(self, name: str) -> bool:
        """Whether an option differs from its unset default."""
        field_name = self.resolve(name)
        default = type(self).model_fields[field_name].get_default(
            call_default_factory=True
        )
        return getattr(self, field_name) != default
