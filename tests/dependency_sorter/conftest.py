from __future__ import annotations

import math
from typing import Any

import pytest


@pytest.fixture()
def people() -> list[dict[str, Any]]:
    return [
        {"id": "Jim", "weight": 0},
        {"id": "Donna", "weight": -100},
        {"id": "Billie", "weight": -5},
        {"id": "Chris", "weight": math.inf},
        {"id": "Jerk", "weight": 100, "depends": "Chris"},
        {"id": "Sherry", "weight": -math.inf, "depends": "Donna"},
        {"id": "Dillon", "weight": 10},
        {"id": "Tom", "weight": -10, "depends": ["Donna", "Sherry"]},
    ]
