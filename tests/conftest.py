from __future__ import annotations

import pytest

SAMPLE_VTT = (
    "WEBVTT\n"
    "\n"
    "00:01:02.000 --> 00:03:04.000\n"
    "Hello, world!\n"
    "\n"
    "00:03:05.000 --> 00:03:08.000\n"
    "Second subtitle"
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config.json and WEBVTT_CODEC_* env out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in (
        "WEBVTT_CODEC_ENCODING",
        "WEBVTT_CODEC_JSON_INDENT",
        "WEBVTT_CODEC_SORT_METADATA",
        "WEBVTT_CODEC_FORMAT",
        "WEBVTT_CODEC_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "xdg" / "webvtt-codec"


@pytest.fixture
def sample_vtt() -> str:
    return SAMPLE_VTT
