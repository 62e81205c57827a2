from __future__ import annotations

import errno
import os
from pathlib import Path

from renls.domain.models import FileEntry
from renls.ports.filesystem_port import FilesystemPort

# Filesystems without hard links (FAT, some network mounts) report one of these.
_LINK_UNSUPPORTED = {errno.EPERM, errno.EOPNOTSUPP, errno.ENOTSUP, errno.EMLINK, errno.EXDEV}


class LocalFilesystemAdapter(FilesystemPort):
    def list_directory_files(self, dir_path: str) -> list[FileEntry]:
        directory = Path(dir_path)
        try:
            with os.scandir(directory) as entries:
                files = [
                    FileEntry(path=directory / entry.name)
                    for entry in entries
                    if entry.is_file()
                ]
        except OSError as exc:
            raise RuntimeError("unable to read directory") from exc
        return sorted(files, key=lambda entry: str(entry.path))

    def rename_file(self, source: Path, destination: Path) -> None:
        if source == destination:
            return
        # link() fails with EEXIST instead of replacing, so the check and the move are one step.
        try:
            os.link(source, destination, follow_symlinks=False)
        except OSError as exc:
            if exc.errno not in _LINK_UNSUPPORTED:
                raise
            self._rename_if_absent(source, destination)
            return
        os.unlink(source)

    def _rename_if_absent(self, source: Path, destination: Path) -> None:
        # os.rename silently replaces an existing destination on POSIX.
        if destination.exists() or destination.is_symlink():
            raise FileExistsError(errno.EEXIST, "File exists", str(destination))
        os.rename(source, destination)
