"""UploadSource protocol and the concrete sources the app reads PDFs from."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class UploadSource(Protocol):
    """A single uploaded file, read once and then released."""

    @property
    def filename(self) -> str:
        """Original name of the uploaded file."""
        ...

    @property
    def size(self) -> int:
        """Size of the upload in bytes."""
        ...

    def read(self) -> bytes:
        """Return the full file content."""
        ...

    def close(self) -> None:
        """Release any storage backing the upload."""
        ...


class BytesUpload:
    """An upload already held in memory."""

    def __init__(self, data: bytes, filename: str, size: int | None = None) -> None:
        self._data = data
        self._filename = filename
        self._size = len(data) if size is None else size

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def size(self) -> int:
        return self._size

    def read(self) -> bytes:
        return self._data

    def close(self) -> None:
        self._data = b""


class PathUpload:
    """A file on local disk, as passed to the CLI."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def filename(self) -> str:
        return self._path.name

    @property
    def size(self) -> int:
        try:
            return self._path.stat().st_size
        except OSError:
            return 0

    def read(self) -> bytes:
        return self._path.read_bytes()

    def close(self) -> None:
        pass


class SpooledUpload:
    """A spooled temporary file received over HTTP.

    ``close()`` closes the spool, which removes any on-disk overflow file.
    """

    def __init__(self, file: BinaryIO, filename: str, size: int | None = None) -> None:
        self._file = file
        self._filename = filename
        self._size = size if size is not None else _measure(file)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def size(self) -> int:
        return self._size

    def read(self) -> bytes:
        self._file.seek(0)
        return self._file.read()

    def close(self) -> None:
        self._file.close()


def _measure(file: BinaryIO) -> int:
    position = file.tell()
    file.seek(0, 2)
    size = file.tell()
    file.seek(position)
    return size
