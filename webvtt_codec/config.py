from __future__ import annotations

import json
import logging
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("vtt", "json", "srt")


def _config_dir() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "webvtt-codec"
    return Path.home() / ".config" / "webvtt-codec"


def _config_file() -> Path:
    return _config_dir() / "config.json"


@dataclass(frozen=True)
class CodecConfig:
    config_dir: Path

    # I/O
    encoding: str

    # Output
    json_indent: int
    sort_metadata: bool
    default_format: str  # vtt | json | srt


def _truthy(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() not in ("", "0", "false", "no", "off")


def _read_file_values(cfg_path: Path) -> dict[str, Any]:
    if not cfg_path.exists():
        return {}
    try:
        data = json.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level must be an object", cfg_path)
        return {}
    return data


def load_config() -> CodecConfig:
    # Priority: config.json → WEBVTT_CODEC_* env → defaults
    config_dir = _config_dir()
    file_values = _read_file_values(config_dir / "config.json")

    def _get(key: str, env: str, default: str) -> Any:
        if key in file_values:
            return file_values[key]
        return os.getenv(env, default)

    default_format = str(_get("default_format", "WEBVTT_CODEC_FORMAT", "vtt")).lower()
    if default_format not in OUTPUT_FORMATS:
        logger.info("Unknown default format '%s' in config, using vtt", default_format)
        default_format = "vtt"

    return CodecConfig(
        config_dir=config_dir,
        encoding=str(_get("encoding", "WEBVTT_CODEC_ENCODING", "utf-8")),
        json_indent=int(_get("json_indent", "WEBVTT_CODEC_JSON_INDENT", "2")),
        sort_metadata=_truthy(_get("sort_metadata", "WEBVTT_CODEC_SORT_METADATA", "0")),
        default_format=default_format,
    )


def save_config(**values: Any) -> None:
    cfg_path = _config_file()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = _read_file_values(cfg_path)
    data.update(values)
    cfg_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
