"""
webvtt-codec: parse and format WebVTT subtitle files.

Example:
    >>> from webvtt_codec import parse_vtt, format_vtt
    >>> doc = parse_vtt("WEBVTT\\n\\n00:01.000 --> 00:02.500\\nHello")
    >>> doc.cues[0].end.ms
    2500
    >>> format_vtt(doc)
    'WEBVTT\\n\\n00:00:01.000 --> 00:00:02.500\\nHello'
"""

import logging

__version__ = "0.1.0"

# Applications configure handlers themselves (the CLI uses logging_setup)
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .vtt.errors import (  # noqa: E402
    InvalidFormat,
    InvalidHours,
    InvalidMetadataLine,
    InvalidMilliseconds,
    InvalidMinutes,
    InvalidSeconds,
    InvalidSetting,
    InvalidTimestamp,
    MissingHeader,
    VttParseError,
)
from .vtt.export import export_srt, format_cue, format_settings, format_timestamp, format_vtt  # noqa: E402
from .vtt.interchange import document_from_dict, document_to_dict, export_json, load_json  # noqa: E402
from .vtt.model import (  # noqa: E402
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
from .vtt.parse import (  # noqa: E402
    VttParseStats,
    parse_cue,
    parse_settings,
    parse_timestamp,
    parse_vtt,
    parse_vtt_with_stats,
)

__all__ = [
    "__version__",
    # Parsing
    "parse_timestamp",
    "parse_settings",
    "parse_cue",
    "parse_vtt",
    "parse_vtt_with_stats",
    "VttParseStats",
    # Formatting
    "format_timestamp",
    "format_settings",
    "format_cue",
    "format_vtt",
    "export_srt",
    # JSON adapter
    "document_to_dict",
    "document_from_dict",
    "export_json",
    "load_json",
    # Models
    "Timestamp",
    "Vertical",
    "Align",
    "LinePercentage",
    "LineNumber",
    "LineAuto",
    "LineSetting",
    "Settings",
    "Cue",
    "Header",
    "Document",
    # Errors
    "VttParseError",
    "InvalidFormat",
    "InvalidTimestamp",
    "InvalidHours",
    "InvalidMinutes",
    "InvalidSeconds",
    "InvalidMilliseconds",
    "InvalidSetting",
    "MissingHeader",
    "InvalidMetadataLine",
]
