from .models import FileEntry, RenameFailure, RenamePair, RenameReport
from .rename_logic import (
    build_rename_pairs,
    find_duplicate_destinations,
    format_pair,
    parse_name_lines,
    split_extension,
    validate_names,
)

__all__ = [
    "FileEntry",
    "RenameFailure",
    "RenamePair",
    "RenameReport",
    "build_rename_pairs",
    "find_duplicate_destinations",
    "format_pair",
    "parse_name_lines",
    "split_extension",
    "validate_names",
]
