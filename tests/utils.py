"""Shared helpers for the dependency-sorter test suite."""

from __future__ import annotations

from typing import Any

from dependency_sorter import Node, Normalizer

PEOPLE_ORDER = ["Donna", "Sherry", "Tom", "Billie", "Jim", "Dillon", "Chris", "Jerk"]


def make_nodes(*records: Any) -> list[Node]:
    """Normalize records with default options."""
    normalizer = Normalizer()
    return [normalizer.normalize(record) for record in records]


def ids(items: list[Any]) -> list[Any]:
    """Return the id of each record or node, in order."""
    result = []
    for item in items:
        if isinstance(item, Node):
            result.append(item.id.value)
        else:
            result.append(item["id"])
    return result


def assert_topological(ordered: list[dict[str, Any]]) -> None:
    """Every record appears after all records it names in ``depends``."""
    position = {record["id"]: index for index, record in enumerate(ordered)}
    for index, record in enumerate(ordered):
        depends = record.get("depends") or []
        if not isinstance(depends, list):
            depends = [depends]
        for dep in depends:
            if dep in position:
                assert position[dep] < index, f"{dep} must precede {record['id']}"
