"""Serialize a :class:`~splot3d.scene.Scene` into a gnuplot ``splot`` script."""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, TextIO, Tuple, Union

import numpy as np

from .config import EmitterConfig, get_emitter_config
from .errors import ScriptWriteError
from .logging_utils import apply_debug_logging
from .palette import Palette, assign_palette
from .scene import Primitive, Scene
from .styles import StyleKey, canonicalize
from .vectors import Vec3, lerp

logger = logging.getLogger(__name__)

POINT_USING = "using 1:2:3:4"
VECTOR_USING = "using 1:2:3:4:5:6:7"
LABEL_CLAUSE = 'using 1:2:3:4:5 with labels left textcolor palette offset char 1,char 1'
END_OF_DATA = "e"
PAUSE_DIRECTIVE = "pause mouse keypress"


@dataclass
class StyleGroup:
    key: StyleKey
    color_index: int
    primitives: List[Primitive]


@dataclass
class ScriptLayout:
    """Style groups in drawing order plus the palette they index into."""

    groups: List[StyleGroup]
    palette: Palette
    color_indices: Dict[StyleKey, int]


def format_number(value: float) -> str:
    """Shortest single-precision text that round-trips, e.g. ``1``, ``0.5``."""

    return np.format_float_positional(np.float32(value), unique=True, trim="-")


_QUOTE_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def quote(text: str) -> str:
    """Double-quote ``text`` for gnuplot, escaping control characters."""

    parts: List[str] = []
    for ch in text:
        if ch in _QUOTE_ESCAPES:
            parts.append(_QUOTE_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\x{ord(ch):02x}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _mantissa(value: float) -> float:
    mantissa, _ = math.frexp(value)
    return abs(mantissa)


def label_anchor(primitive: Primitive) -> Vec3:
    """Where a primitive's label is drawn.

    Points anchor at themselves. Segments anchor between 60% and 90% of the
    way to their end; the fraction is derived from the mantissas of the
    direction components so labels of segments sharing an endpoint rarely
    stack exactly.
    """

    if primitive.is_point:
        return primitive.start
    direction = primitive.direction()
    spread = 1.0 - sum(_mantissa(component) for component in direction) / 3.0
    fraction = 0.6 + 0.3 * spread
    return lerp(primitive.start, primitive.end, fraction)


def plan_layout(scene: Scene) -> ScriptLayout:
    """Group primitives by canonical style and assign palette indices."""

    members: Dict[StyleKey, List[Primitive]] = defaultdict(list)
    for primitive in scene.primitives:
        members[canonicalize(primitive.style)].append(primitive)

    keys = sorted(members)
    palette = assign_palette(keys)
    color_indices = {key: palette.index_of(key.color) for key in keys}
    groups = [StyleGroup(key, color_indices[key], members[key]) for key in keys]
    return ScriptLayout(groups, palette, color_indices)


def _header_lines(scene: Scene, config: EmitterConfig) -> List[str]:
    lines: List[str] = []
    if scene.title:
        lines.append(f"set title {quote(scene.title)}")
    lines.append(f"set view {config.view}")
    lines.append("unset key")
    return lines


def _palette_lines(palette: Palette) -> List[str]:
    defined = ", ".join(f"{entry.index} {quote(entry.color)}" for entry in palette.entries)
    low, high = palette.cb_range
    return [
        f"set palette model RGB maxcolors {len(palette)}",
        f"set palette defined ({defined})",
        "# sets the range of palette values",
        f"set cbrange [{low:.1f}:{high:.1f}]",
        "",
    ]


def _plot_clause(key: StyleKey) -> str:
    if key.is_point:
        tokens = [POINT_USING, "with points", key.attr, f"pointsize {key.width}", "palette"]
    else:
        tokens = [VECTOR_USING, "with vectors", key.attr, f"linewidth {key.width}", "palette"]
    return " ".join(token for token in tokens if token)


def _splot_command(groups: Sequence[StyleGroup]) -> str:
    clauses = [_plot_clause(group.key) for group in groups] + [LABEL_CLAUSE]
    sources = ['splot "-"'] + ['  , ""'] * (len(clauses) - 1)
    return " \\\n".join(f"{source} {clause}" for source, clause in zip(sources, clauses))


def _row(values: Sequence[object], separator: str) -> str:
    return separator.join(format_number(v) if isinstance(v, float) else str(v) for v in values)


def _group_rows(group: StyleGroup, separator: str) -> List[str]:
    rows: List[str] = []
    for primitive in group.primitives:
        if group.key.is_point:
            values: Tuple[object, ...] = (*primitive.start, group.color_index)
        else:
            values = (*primitive.start, *primitive.direction(), group.color_index)
        rows.append(_row(values, separator))
    rows.append(END_OF_DATA)
    return rows


def _label_rows(scene: Scene, layout: ScriptLayout, config: EmitterConfig) -> List[str]:
    rows: List[str] = []
    for primitive in scene.primitives:
        if not primitive.label:
            continue
        text = primitive.label.replace(config.separator, config.label_separator_replacement)
        color_index = layout.color_indices[canonicalize(primitive.style)]
        rows.append(_row((*label_anchor(primitive), text, color_index), config.separator))
    rows.append(END_OF_DATA)
    return rows


def render_script(scene: Scene, config: Optional[EmitterConfig] = None) -> str:
    """Return the complete gnuplot script for ``scene``."""

    config = config or get_emitter_config()
    lines = _header_lines(scene, config)
    if not len(scene):
        logger.info("Scene has no primitives; emitting header only")
        return "\n".join(lines) + "\n"

    layout = plan_layout(scene)
    logger.info(
        "Emitting %d primitive(s) in %d style group(s) with %d palette color(s)",
        len(scene),
        len(layout.groups),
        len(layout.palette),
    )
    lines.extend(_palette_lines(layout.palette))
    lines.append(_splot_command(layout.groups))
    for group in layout.groups:
        logger.debug("Group %s: %d row(s), color index %d", group.key, len(group.primitives), group.color_index)
        lines.extend(_group_rows(group, config.separator))
    lines.extend(_label_rows(scene, layout, config))
    if config.pause:
        lines.append(PAUSE_DIRECTIVE)
    return "\n".join(lines) + "\n"


def encode(scene: Scene, stream: TextIO, config: Optional[EmitterConfig] = None) -> None:
    """Write the script for ``scene`` into an open text stream."""

    script = render_script(scene, config)
    try:
        stream.write(script)
    except OSError as exc:
        raise ScriptWriteError(f"failed to write gnuplot script: {exc}") from exc


def write_script(
    scene: Scene,
    path: Union[str, Path],
    config: Optional[EmitterConfig] = None,
) -> Path:
    """Write the script for ``scene`` to ``path`` and return the path."""

    output_path = Path(path)
    try:
        handle = open(output_path, "w", encoding="utf-8")
    except OSError as exc:
        raise ScriptWriteError(f"cannot open {output_path}: {exc}") from exc
    try:
        with handle:
            encode(scene, handle, config)
    except ScriptWriteError:
        raise
    except OSError as exc:
        raise ScriptWriteError(f"failed to write {output_path}: {exc}") from exc
    logger.info("Wrote gnuplot script to %s", output_path)
    return output_path


apply_debug_logging(globals(), logger=logger, skip={"format_number", "quote", "_mantissa", "_row"})
