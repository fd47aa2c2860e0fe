"""Animated time-display engine: tokenizer, sampler, transitions, scheduler."""

from clocktui.core.engine import ClockEngine
from clocktui.core.events import Event, Key, LogicTick, Mouse, RenderTick, Resize
from clocktui.core.models import AnimatedTimeSpec, Block, Token
from clocktui.core.sampler import sample
from clocktui.core.scheduler import ChannelClosed, EventSource, InputUnavailable
from clocktui.core.tokenizer import CLASSIC_FORMAT, tokenize
from clocktui.core.transitions import advance

__all__ = [
    "CLASSIC_FORMAT",
    "AnimatedTimeSpec",
    "Block",
    "ChannelClosed",
    "ClockEngine",
    "Event",
    "EventSource",
    "InputUnavailable",
    "Key",
    "LogicTick",
    "Mouse",
    "RenderTick",
    "Resize",
    "Token",
    "advance",
    "sample",
    "tokenize",
]
