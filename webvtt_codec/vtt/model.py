from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum


@dataclass(frozen=True, slots=True, order=True)
class Timestamp:
    """Point in time inside a track, millisecond resolution."""

    ms: int

    def __post_init__(self) -> None:
        if isinstance(self.ms, bool) or not isinstance(self.ms, int):
            raise TypeError(f"Timestamp.ms must be int, got {type(self.ms).__name__}")
        if self.ms < 0:
            raise ValueError(f"Timestamp cannot be negative: {self.ms}")

    @classmethod
    def from_timedelta(cls, td: timedelta) -> "Timestamp":
        # sub-millisecond precision is truncated
        return cls(td // timedelta(milliseconds=1))

    def as_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.ms)


class Vertical(str, Enum):
    RIGHT_TO_LEFT = "rl"
    LEFT_TO_RIGHT = "lr"


class Align(str, Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"
    LEFT = "left"
    RIGHT = "right"


def _check_percent(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if not 0 <= value <= 100:
        raise ValueError(f"{name} must be within 0..100: {value}")


@dataclass(frozen=True, slots=True)
class LinePercentage:
    value: int

    def __post_init__(self) -> None:
        _check_percent("LinePercentage.value", self.value)


@dataclass(frozen=True, slots=True)
class LineNumber:
    value: int


@dataclass(frozen=True, slots=True)
class LineAuto:
    pass


LineSetting = LinePercentage | LineNumber | LineAuto


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Cue positioning settings. None means "not specified".
    """

    vertical: Vertical | None = None
    line: LineSetting | None = None
    position: int | None = None  # percent
    size: int | None = None  # percent
    align: Align | None = None

    def __post_init__(self) -> None:
        if self.position is not None:
            _check_percent("Settings.position", self.position)
        if self.size is not None:
            _check_percent("Settings.size", self.size)

    def is_empty(self) -> bool:
        return (
            self.vertical is None
            and self.line is None
            and self.position is None
            and self.size is None
            and self.align is None
        )


@dataclass(frozen=True, slots=True)
class Cue:
    start: Timestamp
    end: Timestamp
    payload: str = ""
    identifier: str | None = None
    settings: Settings | None = None


@dataclass(slots=True)
class Header:
    description: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class Document:
    header: Header = field(default_factory=Header)
    cues: list[Cue] = field(default_factory=list)

    def add_cue(self, cue: Cue) -> None:
        self.cues.append(cue)

    def add_metadata(self, key: str, value: str) -> None:
        self.header.metadata[key] = value
