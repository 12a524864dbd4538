from __future__ import annotations

import logging
from pathlib import Path

import typer

from webvtt_codec.config import OUTPUT_FORMATS, CodecConfig, load_config, save_config
from webvtt_codec.logging_setup import setup_logging
from webvtt_codec.vtt.errors import VttParseError
from webvtt_codec.vtt.export import export_srt, format_vtt
from webvtt_codec.vtt.interchange import export_json, load_json
from webvtt_codec.vtt.model import Document
from webvtt_codec.vtt.parse import VttParseStats, parse_vtt_with_stats

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.callback()
def _root(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")):
    """Parse, normalize and convert WebVTT subtitle files."""
    setup_logging(debug)


def _fail(msg: str) -> typer.Exit:
    typer.echo(f"error: {msg}", err=True)
    return typer.Exit(code=1)


def _read(path: Path, cfg: CodecConfig) -> str:
    try:
        return path.read_text(encoding=cfg.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise _fail(f"cannot read {path}: {e}") from e


def _load_vtt(path: Path, cfg: CodecConfig) -> tuple[Document, VttParseStats]:
    text = _read(path, cfg)
    try:
        return parse_vtt_with_stats(text)
    except VttParseError as e:
        logger.debug("Parse of %s failed (%s)", path, e.kind)
        raise _fail(f"{path}: {e}") from e


def _write(data: str, out: Path | None, cfg: CodecConfig) -> None:
    if out:
        out.write_text(data, encoding=cfg.encoding)
    else:
        typer.echo(data, nl=not data.endswith("\n"))


@app.command()
def parse(vtt_path: Path):
    """Parse a WebVTT file and print stats."""
    cfg = load_config()
    doc, stats = _load_vtt(vtt_path, cfg)
    typer.echo(f"lines_total={stats.lines_total}")
    typer.echo(f"blank_lines={stats.blank_lines}")
    typer.echo(f"metadata_total={stats.metadata_total}")
    typer.echo(f"cues_total={stats.cues_total}")
    typer.echo(f"cues_with_identifier={stats.cues_with_identifier}")
    typer.echo(f"cues_with_settings={stats.cues_with_settings}")
    typer.echo(f"description={doc.header.description or ''}")


@app.command("format")
def format_cmd(
    vtt_path: Path,
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
    sort_metadata: bool | None = typer.Option(
        None, "--sort-metadata/--keep-metadata-order", help="Sort header metadata by key"
    ),
):
    """Rewrite a WebVTT file in canonical form."""
    cfg = load_config()
    doc, _stats = _load_vtt(vtt_path, cfg)
    sort = cfg.sort_metadata if sort_metadata is None else sort_metadata
    _write(format_vtt(doc, sort_metadata=sort), out, cfg)


@app.command()
def export(
    vtt_path: Path,
    fmt: str | None = typer.Option(None, "--format", case_sensitive=False, help="vtt|json|srt"),
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
):
    """Export WebVTT to JSON/SRT/WebVTT (normalized)."""
    cfg = load_config()
    fmt_l = (fmt or cfg.default_format).lower()
    if fmt_l not in OUTPUT_FORMATS:
        raise typer.BadParameter("format must be one of: vtt, json, srt")

    doc, _stats = _load_vtt(vtt_path, cfg)
    if fmt_l == "json":
        data = export_json(doc, indent=cfg.json_indent) + "\n"
    elif fmt_l == "srt":
        data = export_srt(doc)
    else:
        data = format_vtt(doc, sort_metadata=cfg.sort_metadata)
    _write(data, out, cfg)


@app.command("import-json")
def import_json(
    json_path: Path,
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
):
    """Build a WebVTT file from its JSON form."""
    cfg = load_config()
    text = _read(json_path, cfg)
    try:
        doc = load_json(text)
    except VttParseError as e:
        raise _fail(f"{json_path}: {e}") from e
    except ValueError as e:
        # JSONDecodeError, or a number literal past the int conversion limit
        raise _fail(f"{json_path}: invalid JSON: {e}") from e
    _write(format_vtt(doc, sort_metadata=cfg.sort_metadata), out, cfg)


@app.command()
def config(
    set_: list[str] | None = typer.Option(None, "--set", help="key=value to store in config.json"),
):
    """Show settings, or store them with --set."""
    if set_:
        values: dict[str, object] = {}
        for item in set_:
            key, eq, value = item.partition("=")
            if not eq or key not in ("encoding", "json_indent", "sort_metadata", "default_format"):
                raise typer.BadParameter(f"unsupported setting: {item}")
            if key == "json_indent":
                if not value.isdigit():
                    raise typer.BadParameter(f"json_indent must be a number: {value}")
                values[key] = int(value)
            else:
                values[key] = value
        save_config(**values)

    cfg = load_config()
    typer.echo(f"config_dir={cfg.config_dir}")
    typer.echo(f"encoding={cfg.encoding}")
    typer.echo(f"json_indent={cfg.json_indent}")
    typer.echo(f"sort_metadata={cfg.sort_metadata}")
    typer.echo(f"default_format={cfg.default_format}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
