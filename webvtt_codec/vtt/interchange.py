"""
JSON-like tree for documents.

Timestamps travel as canonical `HH:MM:SS.mmm` strings and `line` as its
WebVTT text (`"90%"`, `"-1"`, `"auto"`) so the three line variants stay
distinct. Incoming strings go back through the text grammar, so the same
errors apply in both directions.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import InvalidFormat
from .export import format_line, format_timestamp
from .model import Cue, Document, Header, Settings
from .parse import parse_settings, parse_timestamp


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    return {
        "vertical": settings.vertical.value if settings.vertical is not None else None,
        "line": format_line(settings.line) if settings.line is not None else None,
        "position": settings.position,
        "size": settings.size,
        "align": settings.align.value if settings.align is not None else None,
    }


def cue_to_dict(cue: Cue) -> dict[str, Any]:
    return {
        "identifier": cue.identifier,
        "start": format_timestamp(cue.start),
        "end": format_timestamp(cue.end),
        "settings": settings_to_dict(cue.settings) if cue.settings is not None else None,
        "payload": cue.payload,
    }


def document_to_dict(doc: Document) -> dict[str, Any]:
    return {
        "header": {
            "description": doc.header.description,
            "metadata": dict(doc.header.metadata),
        },
        "cues": [cue_to_dict(c) for c in doc.cues],
    }


def _expect(value: Any, kind: type | tuple[type, ...], where: str, optional: bool = False) -> Any:
    if value is None and optional:
        return None
    if not isinstance(value, kind) or isinstance(value, bool):
        raise InvalidFormat(where)
    return value


def settings_from_dict(data: Any, where: str = "settings") -> Settings:
    data = _expect(data, dict, where)
    tokens: list[str] = []
    for key in ("vertical", "line", "align"):
        value = _expect(data.get(key), str, f"{where}.{key}", optional=True)
        if value is not None:
            tokens.append(f"{key}:{value}")
    for key in ("position", "size"):
        value = _expect(data.get(key), int, f"{where}.{key}", optional=True)
        if value is not None:
            tokens.append(f"{key}:{value}%")
    return parse_settings(" ".join(tokens))


def cue_from_dict(data: Any, where: str = "cue") -> Cue:
    data = _expect(data, dict, where)
    start = _expect(data.get("start"), str, f"{where}.start")
    end = _expect(data.get("end"), str, f"{where}.end")
    settings = data.get("settings")
    return Cue(
        start=parse_timestamp(start),
        end=parse_timestamp(end),
        payload=_expect(data.get("payload", ""), str, f"{where}.payload").strip(),
        identifier=_expect(data.get("identifier"), str, f"{where}.identifier", optional=True),
        settings=settings_from_dict(settings, f"{where}.settings") if settings is not None else None,
    )


def document_from_dict(data: Any) -> Document:
    data = _expect(data, dict, "document")
    header_data = _expect(data.get("header", {}), dict, "header")
    metadata = _expect(header_data.get("metadata", {}), dict, "header.metadata")
    header = Header(
        description=_expect(header_data.get("description"), str, "header.description", optional=True),
        metadata={
            _expect(k, str, "header.metadata"): _expect(v, str, f"header.metadata.{k}")
            for k, v in metadata.items()
        },
    )
    cues = _expect(data.get("cues", []), list, "cues")
    return Document(
        header=header,
        cues=[cue_from_dict(c, f"cues[{i}]") for i, c in enumerate(cues)],
    )


def export_json(doc: Document, indent: int | None = 2) -> str:
    return json.dumps(document_to_dict(doc), ensure_ascii=False, indent=indent)


def load_json(text: str) -> Document:
    return document_from_dict(json.loads(text))
