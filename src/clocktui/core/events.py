"""Events delivered by the scheduler to the main loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class LogicTick:
    """Time to re-sample the wall clock."""

    elapsed_ms: float


@dataclass(frozen=True, slots=True)
class RenderTick:
    """Time to advance running transitions."""

    elapsed_ms: float


@dataclass(frozen=True, slots=True)
class Key:
    key: str
    character: str | None = None


@dataclass(frozen=True, slots=True)
class Mouse:
    x: int
    y: int
    button: int = 0


@dataclass(frozen=True, slots=True)
class Resize:
    width: int
    height: int


Event: TypeAlias = LogicTick | RenderTick | Key | Mouse | Resize

INPUT_EVENT_TYPES: tuple[type, ...] = (Key, Mouse, Resize)
