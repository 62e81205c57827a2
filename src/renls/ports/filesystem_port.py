from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from renls.domain.models import FileEntry


@runtime_checkable
class FilesystemPort(Protocol):
    def list_directory_files(self, dir_path: str) -> list[FileEntry]:
        """Return the files directly inside a directory, sorted by path."""

    def rename_file(self, source: Path, destination: Path) -> None:
        """Rename a file without overwriting an existing destination."""
