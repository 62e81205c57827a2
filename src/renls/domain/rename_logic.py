from __future__ import annotations

import os
from collections import Counter
from pathlib import Path
from typing import Iterable

from .models import FileEntry, RenamePair

RESERVED_NAMES = {".", ".."}
PATH_SEPARATORS = ("/", "\\")


def parse_name_lines(lines: Iterable[str], comment_prefix: str = "#") -> list[str]:
    """
    Keep the lines that are not empty and do not start with the comment prefix,
    trimmed and in their original order. Only a prefix at the very start of the
    line marks a comment.

    Examples:
        >>> parse_name_lines(["# header", "  one ", "", "two\\r\\n"])
        ['one', 'two']
        >>> parse_name_lines(["   ", "#three", "  #4 track"])
        ['#4 track']
    """
    names: list[str] = []
    for line in lines:
        if line == "" or line.startswith(comment_prefix):
            continue
        name = line.strip()
        if name == "":
            continue
        names.append(name)
    return names


def split_extension(name: str) -> tuple[str, str]:
    """
    Split a filename into (base, extension), keeping the dot in the extension.

    Files without an extension and dotfiles such as ".bashrc" get an empty extension.

    Examples:
        >>> split_extension("report.final.pdf")
        ('report.final', '.pdf')
        >>> split_extension("Makefile")
        ('Makefile', '')
        >>> split_extension(".bashrc")
        ('.bashrc', '')
    """
    base, dot, ext = name.rpartition(".")
    if dot == "" or base == "":
        return name, ""
    return base, f".{ext}"


def validate_names(names: list[str]) -> None:
    for name in names:
        if name in RESERVED_NAMES or "\x00" in name or any(sep in name for sep in PATH_SEPARATORS):
            raise RuntimeError(f"invalid name in new name list: \"{name}\"")


def build_rename_pairs(names: list[str], files: list[FileEntry]) -> list[RenamePair]:
    """
    Pair each file with the name at the same index, keeping the file's directory
    and extension.

    Example:
        files = [FileEntry(Path("photos/a.jpg")), FileEntry(Path("photos/b"))]
        build_rename_pairs(["beach", "notes"], files)
        # [RenamePair(photos/a.jpg -> photos/beach.jpg), RenamePair(photos/b -> photos/notes)]
    """
    if len(names) != len(files):
        raise RuntimeError("file list and new name list do not have the same number of items")

    pairs: list[RenamePair] = []
    for name, entry in zip(names, files):
        _, ext = split_extension(entry.path.name)
        pairs.append(RenamePair(source=entry.path, destination=entry.path.parent / f"{name}{ext}"))
    return pairs


def find_duplicate_destinations(pairs: list[RenamePair]) -> list[Path]:
    counts = Counter(pair.destination for pair in pairs)
    return sorted(path for path, count in counts.items() if count > 1)


def display_path(path: Path) -> str:
    """Render a path for output, replacing bytes that are not valid UTF-8."""
    return os.fsencode(path).decode("utf-8", "replace")


def format_pair(pair: RenamePair) -> str:
    return f"{display_path(pair.source)} --> {display_path(pair.destination)}"
