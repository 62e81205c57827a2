from .filesystem_port import FilesystemPort
from .name_source_port import NameSourcePort

__all__ = ["FilesystemPort", "NameSourcePort"]
