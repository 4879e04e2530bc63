from dataclasses import dataclass, field
from enum import Enum


class FieldType(str, Enum):
    """Primitive types a schema field may declare."""

    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"


@dataclass(frozen=True)
class FieldSchema:
    """Declarative description of one output field.

    ``items`` lists the properties of each element when ``type`` is
    ``ARRAY`` (arrays of objects are the only array shape supported).
    """

    name: str
    type: FieldType
    description: str = ""
    required: bool = False
    items: tuple["FieldSchema", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SchemaDefinition:
    """Ordered output shape for one document kind."""

    fields: tuple[FieldSchema, ...]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def required_field_names(self) -> frozenset[str]:
        return frozenset(f.name for f in self.fields if f.required)

    def get_field(self, name: str) -> FieldSchema | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None
