"""Unit tests for raw file I/O."""

import pytest

from srtkit.utils.files import read_all, write_all


@pytest.mark.unit
class TestReadWrite:
    """Test cases for read_all and write_all."""

    def test_write_then_read(self, tmp_path):
        """Bytes are written and read back unchanged."""
        path = tmp_path / "out.srt"
        data = b"1\r\n00:00:01,000 --> 00:00:02,000\r\nHi\r\n\r\n"

        returned = write_all(path, data)

        assert returned == path
        assert read_all(path) == data

    def test_write_creates_parent_directories(self, tmp_path):
        """Missing parent directories are created."""
        path = tmp_path / "nested" / "deeper" / "out.srt"

        write_all(path, b"x")

        assert path.read_bytes() == b"x"

    def test_accepts_string_paths(self, tmp_path):
        """Plain string paths are accepted."""
        path = str(tmp_path / "out.srt")
        write_all(path, b"abc")
        assert read_all(path) == b"abc"

    def test_read_missing_file_propagates_os_error(self, tmp_path):
        """A missing file raises the original FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_all(tmp_path / "missing.srt")

    def test_write_to_directory_propagates_os_error(self, tmp_path):
        """Writing onto a directory raises an OSError."""
        with pytest.raises(OSError):
            write_all(tmp_path, b"x")
