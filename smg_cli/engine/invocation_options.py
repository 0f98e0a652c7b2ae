from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple


def _flag(name: str) -> Any:
    return field(default=None, metadata={"flag": name})


@dataclass(frozen=True)
class InvocationOptions:
    """Generation parameters shared by the direct and interactive paths.

    Every field is optional; ``None`` or an empty string means the parameter
    was not requested. The ``flag`` metadata holds the name the engine expects
    on its command line.
    """

    model: Optional[str] = _flag("model")
    tables: Optional[str] = _flag("tables")
    diagram: Optional[str] = _flag("diagram")
    schema_output: Optional[str] = _flag("schemaOutput")
    data_output: Optional[str] = _flag("dataOutput")
    synthetic_generate: Optional[str] = _flag("syntheticGenerate")
    mock_api_key: Optional[str] = _flag("mockApiKey")

    @classmethod
    def flag_names(cls) -> Dict[str, str]:
        """Map engine flag name -> attribute name."""
        return {f.metadata["flag"]: f.name for f in fields(cls)}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "InvocationOptions":
        """Build options from a mapping keyed by flag or attribute names.

        Unknown keys are ignored. Values are passed through ``str`` unless
        they are ``None``.
        """
        by_flag = cls.flag_names()
        attribute_names = set(by_flag.values())
        values: Dict[str, Optional[str]] = {}
        for key, value in data.items():
            name = by_flag.get(key, key)
            if name not in attribute_names:
                continue
            values[name] = None if value is None else str(value)
        return cls(**values)

    def get(self, flag_name: str) -> Optional[str]:
        """Return the value stored under an engine flag name."""
        return getattr(self, self.flag_names()[flag_name])

    def present(self) -> Iterator[Tuple[str, str]]:
        """Yield (flag, value) for every requested parameter, in field order."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value:
                yield f.metadata["flag"], value
