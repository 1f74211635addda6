"""Settings model for script effects, built from a script function's parameters."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from paintkit.script_info import FunctionInfo, ParameterInfo

__all__ = [
    "ControlKind",
    "ScriptEffectSettings",
    "control_kind",
    "parse_complex",
    "format_float",
]

_INT_MIN = -100000
_INT_MAX = 100000

_FLOAT_INPUT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)?$")
_COMPLEX_INPUT = re.compile(r"^[-+]?\d+(\.\d+)?([-+]\d+(\.\d+)?[ij])?$")
_COMPLEX_PARSE = re.compile(r"^([-+]?\d+(\.\d+)?)([-+]\d+(\.\d+)?)[ij]?$")
_FALSE_TEXTS = frozenset({"", "0", "false"})


class ControlKind(enum.Enum):
    """The kind of input control used for a parameter."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STR = "str"
    TUPLE = "tuple"
    COMPLEX = "complex"
    TEXT = "text"


def control_kind(annotation: str) -> ControlKind:
    """Pick the control kind for a parameter from its annotation text."""
    lowered = annotation.lower()
    if "int" in lowered:
        return ControlKind.INT
    if "float" in lowered or "double" in lowered:
        return ControlKind.FLOAT
    if "bool" in lowered:
        return ControlKind.BOOL
    if "str" in lowered:
        return ControlKind.STR
    if "tuple" in lowered:
        return ControlKind.TUPLE
    if "complex" in lowered:
        return ControlKind.COMPLEX
    return ControlKind.TEXT


def format_float(value: float) -> str:
    """Format a number with a dot and six decimals."""
    return f"{float(value):.6f}"


def parse_complex(text: str) -> complex:
    """Parse text such as ``1.5-2j`` into a complex number; 0 if it does not match."""
    match = _COMPLEX_PARSE.match(text)
    if match is None:
        return complex(0.0, 0.0)
    return complex(float(match.group(1)), float(match.group(3)))


def _clamp_int(value: int) -> int:
    return min(max(value, _INT_MIN), _INT_MAX)


@dataclass
class _Control:
    kind: ControlKind
    label: str
    tooltip: str
    value: Any

    def load(self, stored: Any) -> None:
        """Show a stored setting in the control."""
        if self.kind is ControlKind.INT:
            self.value = _clamp_int(int(stored))
        elif self.kind is ControlKind.FLOAT:
            self.value = format_float(float(stored))
        elif self.kind is ControlKind.BOOL:
            self.value = bool(stored)
        elif self.kind is ControlKind.COMPLEX:
            number = complex(*stored) if isinstance(stored, (tuple, list)) else complex(stored)
            self.value = f"{format_float(number.real)}+{format_float(number.imag)}i"
        else:
            self.value = str(stored)

    def save(self) -> Any:
        """Return the setting the control currently holds."""
        if self.kind is ControlKind.FLOAT:
            try:
                return float(self.value)
            except ValueError:
                return 0.0
        if self.kind is ControlKind.COMPLEX:
            return parse_complex(self.value)
        return self.value


def _initial_value(kind: ControlKind, default: Any) -> Any:
    if kind is ControlKind.INT:
        return _clamp_int(int(default)) if default is not None else 0
    if kind is ControlKind.FLOAT:
        return format_float(float(default)) if default is not None else ""
    if kind is ControlKind.BOOL:
        return bool(default) if default is not None else False
    if kind is ControlKind.COMPLEX:
        if default is None:
            return ""
        return str(default).replace("(", "").replace(")", "")
    return str(default) if default is not None else ""


def _make_control(param: ParameterInfo) -> _Control:
    kind = control_kind(param.annotation)
    return _Control(
        kind=kind,
        label=param.full_name,
        tooltip=param.description,
        value=_initial_value(kind, param.default_value),
    )


class ScriptEffectSettings:
    """One control per script parameter, skipping the input image if there is one.

    ``effect_settings`` given at construction is applied to the controls only
    when it holds exactly one value per control.
    """

    def __init__(
        self,
        function_info: FunctionInfo,
        effect_settings: Optional[Iterable[Any]] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.on_change = on_change
        params = function_info.parameters
        if not function_info.is_creating_function():
            params = params[1:]
        self.controls = [_make_control(param) for param in params]

        stored = list(effect_settings) if effect_settings is not None else []
        if len(stored) == len(self.controls):
            for control, value in zip(self.controls, stored):
                control.load(value)

    def set_text(self, index: int, text: str) -> None:
        """Enter ``text`` into the control at ``index`` as a user would."""
        control = self.controls[index]
        if control.kind is ControlKind.INT:
            value: Any = _clamp_int(int(text))
        elif control.kind is ControlKind.BOOL:
            value = text.strip().lower() not in _FALSE_TEXTS
        elif control.kind is ControlKind.FLOAT:
            if not _FLOAT_INPUT.match(text):
                raise ValueError(f"not a decimal number: {text!r}")
            value = text
        elif control.kind is ControlKind.COMPLEX:
            if text and not _COMPLEX_INPUT.match(text):
                raise ValueError(f"not a complex number: {text!r}")
            value = text
        else:
            value = text

        if value != control.value:
            control.value = value
            if self.on_change is not None:
                self.on_change()

    def effect_settings(self) -> list:
        """Return the current value of every control, in parameter order."""
        return [control.save() for control in self.controls]