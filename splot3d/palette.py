from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .styles import StyleKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteEntry:
    color: str
    index: int


@dataclass(frozen=True)
class Palette:
    """Dense color indices used as the numeric color channel of data rows."""

    entries: Tuple[PaletteEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def index_of(self, color: str) -> int:
        for entry in self.entries:
            if entry.color == color:
                return entry.index
        raise KeyError(color)

    def as_dict(self) -> Dict[str, int]:
        return {entry.color: entry.index for entry in self.entries}

    @property
    def cb_range(self) -> Tuple[float, float]:
        return (-0.5, len(self.entries) - 0.5)


def assign_palette(keys: Iterable[StyleKey]) -> Palette:
    """Number colors ``0..K-1`` in first-seen order over ``keys``.

    ``keys`` must already be in group order (sorted, deduplicated); the result
    is neither alphabetical nor in scene insertion order.
    """

    seen: Dict[str, int] = {}
    entries: List[PaletteEntry] = []
    for key in keys:
        if key.color in seen:
            continue
        seen[key.color] = len(entries)
        entries.append(PaletteEntry(key.color, len(entries)))
    logger.debug("Assigned %d palette color(s)", len(entries))
    return Palette(tuple(entries))
