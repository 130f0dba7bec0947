from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjtasksConfig:
    indent: int | None = None
    separators: tuple[str, str] = (",", ":")
    ensure_ascii: bool = False
    sort_keys: bool = False
    log_level: str = "WARNING"
