"""JSON serialization for --json flag."""

from __future__ import annotations

import json
from pathlib import PurePath
from typing import Any, TextIO

from rich.console import Console


class _Encoder(json.JSONEncoder):
    def default(self, obj: Any) -> Any:
        if isinstance(obj, PurePath):
            return str(obj)
        return super().default(obj)


def print_json(data: Any, out: TextIO | None = None) -> None:
    """Print data as formatted JSON to stdout (or `out`)."""
    console = Console(file=out)
    # ASCII escapes keep undecodable sample bytes printable.
    console.print_json(json.dumps(data, cls=_Encoder, indent=2), ensure_ascii=True)
