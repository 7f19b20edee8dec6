"""SRT format parser and serializer."""

import re
from pathlib import Path

import structlog

from srtkit.core.errors import InvalidTimeRangeError, SubtitleError
from srtkit.core.subtitle import SubLine, Subtitles
from srtkit.core.timestamp import Timestamp
from srtkit.utils.config import get_settings
from srtkit.utils.files import read_all, write_all

logger = structlog.get_logger()

CRLF = "\r\n"

# One cue block over canonical CRLF line breaks. The text group is non-greedy
# and stops at the first blank line.
SRT_BLOCK_PATTERN = re.compile(
    r"(?P<index>\d+)\r\n"
    r"(?P<start_h>\d{2}):(?P<start_m>\d{2}):(?P<start_s>\d{2}),(?P<start_ms>\d{3})"
    r" --> "
    r"(?P<end_h>\d{2}):(?P<end_m>\d{2}):(?P<end_s>\d{2}),(?P<end_ms>\d{3})\r\n"
    r"(?P<text>[\s\S]*?)\r\n\r\n",
    re.ASCII,
)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class SRTParseError(SubtitleError):
    """Exception raised when SRT parsing fails."""


class NotSrtFormatError(SRTParseError):
    """Exception raised when content holds no SRT block at all."""


def normalize(content: str) -> str:
    """Bring raw text into the canonical form the block pattern expects.

    Every line ending becomes CRLF and any trailing whitespace is replaced by
    exactly one CRLF line break plus one blank line.

    Args:
        content: Raw subtitle text

    Returns:
        Normalized text
    """
    unified = _LINE_BREAK_RE.sub(CRLF, content)
    return unified.rstrip() + CRLF * 2


def is_srt(content: str) -> bool:
    """Return True if normalized content contains at least one SRT block."""
    return SRT_BLOCK_PATTERN.search(content) is not None


def validate(content: str) -> None:
    """Check that normalized content contains at least one SRT block.

    Raises:
        NotSrtFormatError: If no block matches
    """
    if not is_srt(content):
        raise NotSrtFormatError(
            "Content does not match the SRT format: no subtitle block found"
        )


def _timestamp_from_match(match: re.Match[str], prefix: str) -> Timestamp:
    return Timestamp(
        hours=int(match[f"{prefix}_h"]),
        minutes=int(match[f"{prefix}_m"]),
        seconds=int(match[f"{prefix}_s"]),
        milliseconds=int(match[f"{prefix}_ms"]),
    )


def parse_srt(content: str) -> Subtitles:
    """Parse SRT format string into a Subtitles object.

    Text between blocks that does not match the block grammar is skipped.

    Args:
        content: SRT format string content, any line ending style

    Returns:
        Subtitles containing the parsed cues in file order

    Raises:
        NotSrtFormatError: If content contains no SRT block
        SRTParseError: If a block ends before it starts
        IndexContiguityError: If block indices are not 1..n or blocks are
            not in time order
    """
    normalized = normalize(content)
    validate(normalized)

    lines = []
    for block_num, match in enumerate(
        SRT_BLOCK_PATTERN.finditer(normalized), start=1
    ):
        try:
            line = SubLine(
                index=int(match["index"]),
                start=_timestamp_from_match(match, "start"),
                end=_timestamp_from_match(match, "end"),
                text=match["text"],
            )
        except InvalidTimeRangeError as e:
            raise SRTParseError(f"Block {block_num}: {e}") from e
        lines.append(line)

    subtitles = Subtitles.from_sequence(lines)
    logger.debug("srt_parsed", cues=len(subtitles), chars=len(normalized))
    return subtitles


def render_block(line: SubLine) -> str:
    """Render one cue as an SRT block, including its blank-line terminator."""
    timing = f"{line.start} --> {line.end}"
    return f"{line.index}{CRLF}{timing}{CRLF}{line.text}{CRLF}{CRLF}"


def serialize_srt(subtitles: Subtitles) -> str:
    """Serialize Subtitles to SRT format string.

    The output uses CRLF line breaks. Every block carries its own blank-line
    terminator and one extra blank line follows the last block, so an empty
    collection still serializes to a single blank line.

    Args:
        subtitles: Subtitles to serialize

    Returns:
        SRT format string
    """
    blocks = "".join(render_block(line) for line in subtitles)
    return blocks + CRLF * 2


def load_srt(path: str | Path, *, encoding: str | None = None) -> Subtitles:
    """Read and parse an SRT file.

    Args:
        path: File to read
        encoding: Codec override, defaults to ``Settings.encoding``

    Returns:
        Parsed subtitles

    Raises:
        OSError: If the file cannot be read
        SRTParseError: If the file cannot be decoded or parsed
    """
    codec = encoding or get_settings().encoding
    data = read_all(path)
    try:
        content = data.decode(codec)
    except UnicodeDecodeError as e:
        raise SRTParseError(f"Failed to decode {path} as {codec}: {e}") from e

    subtitles = parse_srt(content.removeprefix("\ufeff"))
    logger.info("srt_loaded", path=str(path), cues=len(subtitles))
    return subtitles


def save_srt(
    subtitles: Subtitles, path: str | Path, *, encoding: str | None = None
) -> Path:
    """Serialize subtitles and write them to a file.

    Args:
        subtitles: Subtitles to save
        path: Destination file
        encoding: Codec override, defaults to ``Settings.output_encoding``

    Returns:
        Path to the written file

    Raises:
        OSError: If the file cannot be written
    """
    codec = encoding or get_settings().output_encoding
    written = write_all(path, serialize_srt(subtitles).encode(codec))
    logger.info("srt_saved", path=str(written), cues=len(subtitles))
    return written
