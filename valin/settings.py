"""Application settings and their TOML form."""

from __future__ import annotations

import math
import struct
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w


class SettingsError(ValueError):
    """Settings text could not be understood."""


def _as_f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def human_number(value: float) -> float:
    """Truncate a single-precision value to two decimals for display."""
    return math.trunc(_as_f32(value) * 100.0) / 100.0


@dataclass
class EditorSettings:
    font_size: float = 17.0
    line_height: float = 1.6


@dataclass
class AppSettings:
    editor: EditorSettings = field(default_factory=EditorSettings)

    def to_toml(self) -> str:
        return tomli_w.dumps(
            {
                "editor": {
                    "font_size": human_number(self.editor.font_size),
                    "line_height": human_number(self.editor.line_height),
                }
            }
        )

    @classmethod
    def from_toml(cls, text: str) -> AppSettings:
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as error:
            raise SettingsError(str(error)) from error
        editor = document.get("editor")
        if not isinstance(editor, dict):
            raise SettingsError("missing table 'editor'")
        return cls(
            editor=EditorSettings(
                font_size=_number(editor, "font_size"),
                line_height=_number(editor, "line_height"),
            )
        )


def _number(table: dict[str, Any], key: str) -> float:
    if key not in table:
        raise SettingsError(f"missing field '{key}'")
    value = table[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"field '{key}' must be a number")
    return float(value)