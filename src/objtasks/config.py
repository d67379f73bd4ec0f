from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjtasksConfig:
    sort_keys: bool = False
    indent: int | None = None
    log_level: str = "WARNING"
