from .colors import DEFAULT_COLOR, STANDARD_COLORS, std_color
from .config import EmitterConfig, get_emitter_config, set_emitter_config
from .errors import ScriptWriteError
from .styles import (
    FILLED_HEAD,
    NO_HEAD,
    PrimitiveKind,
    Style,
    StyleKey,
    canonicalize,
    clamp_width,
)
from .palette import Palette, PaletteEntry, assign_palette
from .scene import CursorState, Primitive, Scene
from .emitter import encode, label_anchor, plan_layout, render_script, write_script
from .demo import build_quaternion_scene

__all__ = [
    'DEFAULT_COLOR',
    'STANDARD_COLORS',
    'std_color',
    'EmitterConfig',
    'get_emitter_config',
    'set_emitter_config',
    'ScriptWriteError',
    'FILLED_HEAD',
    'NO_HEAD',
    'PrimitiveKind',
    'Style',
    'StyleKey',
    'canonicalize',
    'clamp_width',
    'Palette',
    'PaletteEntry',
    'assign_palette',
    'CursorState',
    'Primitive',
    'Scene',
    'encode',
    'label_anchor',
    'plan_layout',
    'render_script',
    'write_script',
    'build_quaternion_scene',
]
