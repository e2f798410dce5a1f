from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from src.domain.models.breed import BreedRecord
from src.domain.value_objects.breed_type import BreedType
from src.domain.value_objects.source_tag import SourceTag

CATALOG_TEMPLATE = "breeds_generated.py.j2"


def py_literal(value: Any) -> str:
    """Python source for a JSON-like value (str, int, bool, None, list, dict)."""
    if value is None or isinstance(value, bool):
        return repr(value)
    if isinstance(value, str):
        # JSON string escapes are valid Python string escapes
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(py_literal(v) for v in value) + "]"
    if isinstance(value, dict):
        items = ", ".join(f"{py_literal(str(k))}: {py_literal(v)}" for k, v in value.items())
        return "{" + items + "}"
    raise TypeError(f"Unsupported literal type: {type(value).__name__}")


@dataclass(slots=True)
class CatalogRenderer:
    env: Environment

    @classmethod
    def create_default(cls) -> CatalogRenderer:
        base = Path(__file__).resolve().parent / "templates"
        env = Environment(
            loader=FileSystemLoader(str(base)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        env.filters["pyliteral"] = py_literal
        return cls(env=env)

    def render(self, records: Sequence[BreedRecord], *, generator_version: str) -> str:
        template = self.env.get_template(CATALOG_TEMPLATE)
        return template.render(
            generator_version=generator_version,
            breed_types=[t.value for t in BreedType],
            source_tags=[s.value for s in SourceTag],
            records=[r.as_dict() for r in records],
        )
