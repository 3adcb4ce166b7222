"""
Declarative row projections.

A `Projection` is the output contract of one entity inside a query: which
table alias it reads from, which columns become which fields, and which
child projections nest under it. It renders its own SELECT list with
collision-free aliases (`<name>__<field>`) and rebuilds the nested dict
from a flat row using only those aliases, so two joined tables that both
have a `name` or `url` column can never be mixed up.

Table aliases used across the project:
    ci circuits, ra races, d drivers, co constructors, r results,
    s status, q qualifying, ds driver_standings, cs constructor_standings
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Projection:
    name: str
    source: str
    columns: Mapping[str, str]
    nested: Mapping[str, "Projection"] = field(default_factory=dict)

    def alias(self, field_name: str) -> str:
        return f"{self.name}__{field_name}"

    def select_list(self) -> str:
        parts = [
            f"{self.source}.{column} AS {self.alias(field_name)}"
            for field_name, column in self.columns.items()
        ]
        parts.extend(child.select_list() for child in self.nested.values())
        return ",\n          ".join(parts)

    def extract(self, row: Mapping[str, Any]) -> dict[str, Any]:
        data = {field_name: row[self.alias(field_name)] for field_name in self.columns}
        for key, child in self.nested.items():
            data[key] = child.extract(row)
        return data
