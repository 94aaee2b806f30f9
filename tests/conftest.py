from datetime import date
from pathlib import Path
import sys

import pytest

# Ensure project root is on sys.path for imports like 'rotina.recurrence'
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rotina.schemas import Task  # noqa: E402

ANCHOR = date(2025, 1, 6)  # Monday


@pytest.fixture()
def anchor() -> date:
    return ANCHOR


@pytest.fixture()
def make_task():
    counter = {"next_id": 1}

    def _make(recurrence=None, **overrides) -> Task:
        task_id = overrides.pop("id", counter["next_id"])
        counter["next_id"] += 1
        data = {
            "id": task_id,
            "name": f"Task {task_id}",
            "created_at": ANCHOR,
            "category": "casa",
            "primary_person": "rubens",
            "periods": ("MA",),
            "recurrence": recurrence or {"type": "daily", "interval": 1},
        }
        data.update(overrides)
        return Task.model_validate(data)

    return _make
