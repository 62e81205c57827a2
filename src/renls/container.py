from __future__ import annotations

from typing import Any

from renls.adapters.local_filesystem import LocalFilesystemAdapter
from renls.adapters.name_list_reader import FileNameListReader, StdinNameListReader
from renls.ports.name_source_port import NameSourcePort
from renls.services.rename_service import RenameService
from renls.settings import RENLS_COMMENT_PREFIX, RENLS_ENCODING


def build_name_source(file_path: str | None, encoding: str = RENLS_ENCODING) -> NameSourcePort:
    if file_path:
        return FileNameListReader(file_path, encoding=encoding)
    return StdinNameListReader(encoding=encoding)


def build_services(
    file_path: str | None,
    encoding: str = RENLS_ENCODING,
    comment_prefix: str = RENLS_COMMENT_PREFIX,
) -> dict[str, Any]:
    filesystem = LocalFilesystemAdapter()
    return {
        "rename_service": RenameService(filesystem, comment_prefix=comment_prefix),
        "name_source": build_name_source(file_path, encoding=encoding),
    }
