from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ExtractionResult:
    """Parsed model output with explicit presence per field.

    A field counts as present only when its key exists and the value is
    not ``null``; absence is resolved into defaults during normalization.
    """

    values: Mapping[str, Any] = field(default_factory=dict)

    def has(self, name: str) -> bool:
        return self.values.get(name) is not None

    def get(self, name: str, default: Any = None) -> Any:
        value = self.values.get(name)
        return default if value is None else value

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(name for name in self.values if self.has(name))
