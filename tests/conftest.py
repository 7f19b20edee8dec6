"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest

from srtkit.core.subtitle import SubLine, Subtitles
from srtkit.core.timestamp import Timestamp
from srtkit.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the get_settings LRU cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def no_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Switch to a temporary directory with no .env file."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content with LF line endings."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
And this is the third one.
"""


@pytest.fixture
def five_block_srt_content() -> str:
    """Return five blocks with mixed line endings and trailing stray whitespace."""
    return (
        "1\n00:01:38,958 --> 00:01:49,609\nFirst line\n\n"
        "2\r\n00:04:19,604 --> 00:04:20,970\r\n<i>Your Grace.</i>\r\n\r\n"
        "3\n00:04:21,072 --> 00:04:24,707\nThe trial will be\r\n"
        "getting under way soon.\n\n"
        "4\r\n00:04:57,141 --> 00:04:58,541\r\nYou got my money?\n\n"
        "5\n00:04:58,643 --> 00:05:00,943\nLater.\nGo away.\n    \n \n  "
    )


def make_line(index: int, start_ms: int, end_ms: int, text: str = "") -> SubLine:
    """Build a cue from millisecond offsets."""
    return SubLine(
        index=index,
        start=Timestamp.from_milliseconds(start_ms),
        end=Timestamp.from_milliseconds(end_ms),
        text=text or f"Cue {index}",
    )


@pytest.fixture
def gapped_subtitles() -> Subtitles:
    """Four cues with gaps and one touching boundary (cue 2 end == cue 3 start)."""
    return Subtitles.from_sequence(
        [
            make_line(1, 1_000, 2_000),
            make_line(2, 3_000, 4_000),
            make_line(3, 4_000, 5_000),
            make_line(4, 7_000, 8_000),
        ]
    )


@pytest.fixture
def cue():
    """Return a factory building cues from millisecond offsets."""
    return make_line
