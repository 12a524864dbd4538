from __future__ import annotations

from .model import Cue, Document, LineAuto, LineNumber, LinePercentage, LineSetting, Settings, Timestamp
from .parse import HEADER_MARKER, TIMING_SEPARATOR


def _split_ms(ms: int) -> tuple[int, int, int, int]:
    h, rem = divmod(ms, 3_600_000)
    m, rem = divmod(rem, 60_000)
    s, ms2 = divmod(rem, 1_000)
    return h, m, s, ms2


_HOURS_CHUNK_DIGITS = 1000
_HOURS_CHUNK = 10**_HOURS_CHUNK_DIGITS


def _fmt_hours(h: int) -> str:
    if h < _HOURS_CHUNK:
        return f"{h:02d}"
    # str() refuses ints past sys.get_int_max_str_digits(), so go chunk by chunk
    chunks: list[int] = []
    while h:
        h, chunk = divmod(h, _HOURS_CHUNK)
        chunks.append(chunk)
    head = str(chunks.pop())
    return head + "".join(f"{c:0{_HOURS_CHUNK_DIGITS}d}" for c in reversed(chunks))


def format_timestamp(ts: Timestamp) -> str:
    # HH:MM:SS.mmm, hours grow past two digits when needed
    h, m, s, ms = _split_ms(ts.ms)
    return f"{_fmt_hours(h)}:{m:02d}:{s:02d}.{ms:03d}"


def format_line(line: LineSetting) -> str:
    if isinstance(line, LinePercentage):
        return f"{line.value}%"
    if isinstance(line, LineNumber):
        return str(line.value)
    if isinstance(line, LineAuto):
        return "auto"
    raise TypeError(f"Unknown line setting: {line!r}")


def format_settings(settings: Settings) -> str:
    """
    Fixed order: vertical, line, position, size, align. Absent fields are skipped.
    """
    out: list[str] = []
    if settings.vertical is not None:
        out.append(f"vertical:{settings.vertical.value}")
    if settings.line is not None:
        out.append(f"line:{format_line(settings.line)}")
    if settings.position is not None:
        out.append(f"position:{settings.position}%")
    if settings.size is not None:
        out.append(f"size:{settings.size}%")
    if settings.align is not None:
        out.append(f"align:{settings.align.value}")
    return " ".join(out)


def format_cue(cue: Cue) -> str:
    out: list[str] = []
    if cue.identifier is not None:
        out.append(cue.identifier)

    timing = f"{format_timestamp(cue.start)} {TIMING_SEPARATOR} {format_timestamp(cue.end)}"
    if cue.settings is not None:
        settings = format_settings(cue.settings)
        if settings:
            timing = f"{timing} {settings}"
    out.append(timing)
    out.append(cue.payload.strip())
    return "\n".join(out)


def format_vtt(doc: Document, sort_metadata: bool = False) -> str:
    """
    Header line, metadata, blank line, then cues separated by one blank line.
    No trailing separator after the last cue.
    """
    header = doc.header
    out: list[str] = []
    if header.description:
        out.append(f"{HEADER_MARKER} {header.description}")
    else:
        out.append(HEADER_MARKER)

    keys = sorted(header.metadata) if sort_metadata else list(header.metadata)
    for k in keys:
        out.append(f"{k}: {header.metadata[k]}")
    out.append("")

    head = "\n".join(out) + "\n"
    return head + "\n\n".join(format_cue(c) for c in doc.cues)


def _fmt_srt_time(ts: Timestamp) -> str:
    # HH:MM:SS,mmm
    h, m, s, ms = _split_ms(ts.ms)
    return f"{_fmt_hours(h)}:{m:02d}:{s:02d},{ms:03d}"


def export_srt(doc: Document) -> str:
    """
    Cues are renumbered from 1; identifiers, settings and header are dropped.
    """
    if not doc.cues:
        return ""
    out: list[str] = []
    for i, cue in enumerate(doc.cues, start=1):
        out.append(str(i))
        out.append(f"{_fmt_srt_time(cue.start)} --> {_fmt_srt_time(cue.end)}")
        out.append(cue.payload.strip())
        out.append("")
    return "\n".join(out)
