"""Subtitle format handlers."""

from srtkit.formats.srt import (
    NotSrtFormatError,
    SRTParseError,
    is_srt,
    load_srt,
    normalize,
    parse_srt,
    render_block,
    save_srt,
    serialize_srt,
    validate,
)

__all__ = [
    "NotSrtFormatError",
    "SRTParseError",
    "is_srt",
    "load_srt",
    "normalize",
    "parse_srt",
    "render_block",
    "save_srt",
    "serialize_srt",
    "validate",
]
