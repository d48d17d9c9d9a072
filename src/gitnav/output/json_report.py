"""JSON reporter for scripting: same shape as the cache record."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Tuple

from gitnav.snapshot.models import Snapshot, to_dict


def render(
    snapshot: Snapshot,
    *,
    branch: Optional[str] = None,
    ahead_behind: Optional[Tuple[int, int]] = None,
) -> str:
    """Return formatted JSON string."""
    data: Dict[str, Any] = to_dict(snapshot)
    if branch is not None:
        data["branch"] = branch
    if ahead_behind is not None:
        data["ahead"], data["behind"] = ahead_behind
    return json.dumps(data, indent=2)
