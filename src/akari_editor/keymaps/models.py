"""Dataclasses describing shortcut bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

# Platform command keys all behave like Ctrl.
_MODIFIER_ALIASES = {
    "cmd": "ctrl",
    "command": "ctrl",
    "meta": "ctrl",
    "super": "ctrl",
    "control": "ctrl",
    "option": "alt",
}

_KEY_ALIASES = {
    "return": "enter",
    "esc": "escape",
    "grave_accent": "`",
    "backtick": "`",
    "space": " ",
}


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = (m.strip().lower() for m in modifiers if m.strip())
    folded = (_MODIFIER_ALIASES.get(value, value) for value in values)
    return tuple(sorted(dict.fromkeys(folded)))


def normalize_key(key: str) -> str:
    if len(key) == 1:
        return key.lower()
    lowered = key.strip().lower()
    return _KEY_ALIASES.get(lowered, lowered)


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized chord such as ``ctrl+shift+z``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", normalize_key(self.key))
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, chord: str) -> "KeyStroke":
        """Parse ``"Ctrl+Shift+Z"``-style text; a lone ``+`` is the plus key."""

        text = chord.strip()
        if not text:
            raise ValueError("chord cannot be empty")
        if text == "+" or text.endswith("++"):
            head = text[:-2] if text.endswith("++") else ""
            return cls("+", tuple(part for part in head.split("+") if part))
        *modifiers, key = text.split("+")
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Simple boolean condition used to gate bindings."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        expr = expression.strip()
        if not expr:
            raise ValueError("expression cannot be empty")
        expected = True
        if expr.startswith("!"):
            expected = False
            expr = expr[1:]
        return cls(expr, expected)

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        return bool(context.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used when a binding fires."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a chord in a scope with an action."""

    id: str
    scope: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.scope:
            raise ValueError("binding scope cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))
        normalized_when = tuple(
            clause if isinstance(clause, WhenClause) else WhenClause.parse(str(clause))
            for clause in self.when
        )
        object.__setattr__(self, "when", normalized_when)

    @property
    def when_map(self) -> Mapping[str, bool]:
        return MappingProxyType({clause.flag: clause.expected for clause in self.when})

    def allows(self, context: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(context) for clause in self.when)

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "WhenClause",
    "normalize_key",
    "normalize_modifiers",
]
