"""Configuration helpers for script emission."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class EmitterConfig:
    separator: str = " "
    label_separator_replacement: str = "-"
    view: str = "equal xyz"
    pause: bool = True


_EMITTER_CONFIG = EmitterConfig()


def get_emitter_config() -> EmitterConfig:
    return copy.deepcopy(_EMITTER_CONFIG)


def set_emitter_config(config: EmitterConfig) -> None:
    global _EMITTER_CONFIG
    _EMITTER_CONFIG = copy.deepcopy(config)
