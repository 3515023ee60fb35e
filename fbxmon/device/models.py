"""Page data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawPage:
    """Decoded status page, one entry per text line."""
    lines: tuple[str, ...]
    url: str = ""

    @classmethod
    def from_text(cls, text: str, url: str = "") -> RawPage:
        return cls(lines=tuple(text.splitlines()), url=url)

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
