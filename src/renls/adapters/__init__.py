from .local_filesystem import LocalFilesystemAdapter
from .name_list_reader import FileNameListReader, StdinNameListReader

__all__ = ["FileNameListReader", "LocalFilesystemAdapter", "StdinNameListReader"]
