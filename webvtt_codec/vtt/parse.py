from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from .errors import (
    InvalidFormat,
    InvalidHours,
    InvalidMetadataLine,
    InvalidMilliseconds,
    InvalidMinutes,
    InvalidSeconds,
    InvalidSetting,
    MissingHeader,
    VttParseError,
)
from .model import (
    Align,
    Cue,
    Document,
    Header,
    LineAuto,
    LineNumber,
    LinePercentage,
    LineSetting,
    Settings,
    Timestamp,
    Vertical,
)

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"\d+", re.ASCII)
_FRACTION_RE = re.compile(r"\d{1,3}", re.ASCII)
_LINE_NUMBER_RE = re.compile(r"-?\d+", re.ASCII)
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")

TIMING_SEPARATOR = "-->"
HEADER_MARKER = "WEBVTT"


@dataclass(frozen=True, slots=True)
class VttParseStats:
    lines_total: int
    blank_lines: int
    metadata_total: int
    cues_total: int
    cues_with_identifier: int
    cues_with_settings: int


def _split_lines(text: str) -> list[str]:
    return _NEWLINE_RE.split(text)


# --- timestamps ---------------------------------------------------------


def _number(raw: str, error: type[VttParseError], upper: int | None = None) -> int:
    if not _DIGITS_RE.fullmatch(raw):
        raise error(raw)
    try:
        value = int(raw)
    except ValueError:
        # digit run past the interpreter's int conversion limit
        raise error(raw) from None
    if upper is not None and value > upper:
        raise error(raw)
    return value


def _parse_seconds_ms(raw: str) -> tuple[int, int]:
    sec, dot, frac = raw.partition(".")
    seconds = _number(sec, InvalidSeconds, upper=59)
    if not dot:
        return seconds, 0
    if not _FRACTION_RE.fullmatch(frac):
        raise InvalidMilliseconds(frac)
    # "5" -> 500ms, "05" -> 50ms, "005" -> 5ms
    return seconds, int(frac.ljust(3, "0"))


def parse_timestamp(text: str) -> Timestamp:
    """
    Parse `HH:MM:SS.mmm` or `MM:SS.mmm`.

    Hours are unbounded, the fraction is optional and short fractions are
    right-padded with zeros. Minutes are capped at 59 in both shapes, so
    `75:00.000` is rejected rather than read as 75 minutes; longer spans
    need the hours field.
    """
    parts = text.split(":")
    if len(parts) == 3:
        hours = _number(parts[0], InvalidHours)
        minutes = _number(parts[1], InvalidMinutes, upper=59)
    elif len(parts) == 2:
        hours = 0
        minutes = _number(parts[0], InvalidMinutes, upper=59)
    else:
        raise InvalidFormat(text)

    seconds, millis = _parse_seconds_ms(parts[-1])
    return Timestamp(hours * 3_600_000 + minutes * 60_000 + seconds * 1_000 + millis)


# --- settings -----------------------------------------------------------


def _percentage(value: str, token: str) -> int:
    if not value.endswith("%"):
        raise InvalidSetting(token)
    digits = value[:-1]
    if not _DIGITS_RE.fullmatch(digits):
        raise InvalidSetting(token)
    try:
        pct = int(digits)
    except ValueError:
        raise InvalidSetting(token) from None
    if pct > 100:
        raise InvalidSetting(token)
    return pct


def _vertical(value: str, token: str) -> Vertical:
    try:
        return Vertical(value)
    except ValueError:
        raise InvalidSetting(token) from None


def _line(value: str, token: str) -> LineSetting:
    if value == "auto":
        return LineAuto()
    if value.endswith("%"):
        return LinePercentage(_percentage(value, token))
    if _LINE_NUMBER_RE.fullmatch(value):
        try:
            return LineNumber(int(value))
        except ValueError:
            raise InvalidSetting(token) from None
    raise InvalidSetting(token)


def _align(value: str, token: str) -> Align:
    try:
        return Align(value)
    except ValueError:
        raise InvalidSetting(token) from None


_SETTING_PARSERS: dict[str, Callable[[str, str], object]] = {
    "vertical": _vertical,
    "line": _line,
    "position": _percentage,
    "size": _percentage,
    "align": _align,
}


def parse_settings(text: str) -> Settings:
    """
    Parse the `key:value` list that follows the end timestamp.

    Unknown keys, tokens without a colon and bad values all raise
    InvalidSetting with the token. A repeated key overrides the earlier one.
    """
    values: dict[str, object] = {}
    for token in text.split():
        key, colon, value = token.partition(":")
        parser = _SETTING_PARSERS.get(key)
        if not colon or parser is None:
            raise InvalidSetting(token)
        values[key] = parser(value, token)
    return Settings(**values)  # type: ignore[arg-type]


# --- cues ---------------------------------------------------------------


def _parse_cue_lines(lines: list[str]) -> Cue:
    if not lines or not any(ln.strip() for ln in lines):
        raise InvalidFormat("")

    identifier: str | None = None
    idx = 0
    if TIMING_SEPARATOR not in lines[0]:
        identifier = lines[0]
        idx = 1
        if idx >= len(lines):
            raise InvalidFormat(lines[0])

    timing_line = lines[idx]
    timing = timing_line.split(TIMING_SEPARATOR)
    if len(timing) != 2:
        raise InvalidFormat(timing_line)

    start = parse_timestamp(timing[0].strip())
    tail = timing[1].split()
    if not tail:
        raise InvalidFormat(timing_line)
    end = parse_timestamp(tail[0])

    settings_text = " ".join(tail[1:])
    settings = parse_settings(settings_text) if settings_text else None

    payload = "\n".join(lines[idx + 1 :]).strip()
    return Cue(start=start, end=end, payload=payload, identifier=identifier, settings=settings)


def parse_cue(text: str) -> Cue:
    """
    Parse one cue block: optional identifier, timing line, payload lines.
    """
    return _parse_cue_lines(_split_lines(text))


# --- documents ----------------------------------------------------------


def parse_vtt(text: str) -> Document:
    doc, _stats = parse_vtt_with_stats(text)
    return doc


def parse_vtt_with_stats(text: str) -> tuple[Document, VttParseStats]:
    """
    Supported:
    - `WEBVTT` first line with an optional description
    - `key: value` metadata lines up to the first blank line
    - cue blocks separated by one or more blank lines

    Parsing is all-or-nothing: the first error is raised as is.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = _split_lines(text)
    if len(lines) > 1 and lines[-1] == "":
        # trailing line terminator
        lines.pop()

    first = lines[0].strip()
    if not first.startswith(HEADER_MARKER):
        raise MissingHeader(first or None)

    header = Header(description=first[len(HEADER_MARKER) :].strip() or None)
    blank = 0

    i = 1
    while i < len(lines):
        line = lines[i].strip()
        i += 1
        if not line:
            blank += 1
            break
        key, colon, value = line.partition(":")
        if not colon:
            raise InvalidMetadataLine(line)
        header.metadata[key.strip()] = value.strip()

    cues: list[Cue] = []
    block: list[str] = []
    block_start = i

    def _flush() -> None:
        try:
            cues.append(_parse_cue_lines(block))
        except VttParseError as e:
            logger.debug("Rejecting cue block at line %d: %s", block_start + 1, e)
            raise
        block.clear()

    for lineno in range(i, len(lines)):
        line = lines[lineno]
        if not line.strip():
            blank += 1
            if block:
                _flush()
            continue
        if not block:
            block_start = lineno
        block.append(line)
    if block:
        _flush()

    doc = Document(header=header, cues=cues)
    stats = VttParseStats(
        lines_total=len(lines),
        blank_lines=blank,
        metadata_total=len(header.metadata),
        cues_total=len(cues),
        cues_with_identifier=sum(1 for c in cues if c.identifier is not None),
        cues_with_settings=sum(1 for c in cues if c.settings is not None),
    )
    logger.debug(
        "Parsed WebVTT document: %d cues, %d metadata entries", stats.cues_total, stats.metadata_total
    )
    return doc, stats
