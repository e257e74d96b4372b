"""JSON output: deterministic report serialization."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import BaseModel


def render_json(report: BaseModel) -> str:
    """Serialize *report* with sorted keys so equal reports give equal bytes."""
    data = report.model_dump(mode="json")
    return json.dumps(data, sort_keys=True, indent=2) + "\n"
