from __future__ import annotations

import re
from typing import Any, Sequence

from fluentcheck.execution.formatting import expand, format_plain

_BECAUSE_RE = re.compile(r"because\b", re.IGNORECASE)


def format_reason(reason: str | None, args: Sequence[Any] = ()) -> str:
    """Normalize a justification phrase so it reads "because ...".

    Returns an empty string when there is no reason. Positional ``{n}``
    placeholders are filled from *args* after the prefix is added.
    """
    if not reason:
        return ""
    if not _BECAUSE_RE.match(reason.lstrip()):
        reason = f"because {reason}"
    return expand(reason, args, format_plain)
