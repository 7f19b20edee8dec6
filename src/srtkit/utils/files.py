"""Raw file I/O used by the SRT loader and writer."""

from pathlib import Path

import structlog

logger = structlog.get_logger()


def read_all(path: str | Path) -> bytes:
    """Read a whole file.

    Raises:
        OSError: If the file cannot be read, propagated unchanged
    """
    path = Path(path)
    data = path.read_bytes()
    logger.debug("file_read", path=str(path), size=len(data))
    return data


def write_all(path: str | Path, data: bytes) -> Path:
    """Write bytes to a file, creating missing parent directories.

    Returns:
        Path to the written file

    Raises:
        OSError: If the file cannot be written, propagated unchanged
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.debug("file_written", path=str(path), size=len(data))
    return path
