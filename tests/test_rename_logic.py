import os
from pathlib import Path

import pytest

from renls.domain.models import FileEntry, RenamePair
from renls.domain.rename_logic import (
    build_rename_pairs,
    display_path,
    find_duplicate_destinations,
    format_pair,
    parse_name_lines,
    split_extension,
    validate_names,
)


def test_parse_name_lines_drops_blank_and_comment_lines() -> None:
    lines = ["# new names", "", "  one  ", "\t", "two\r", "#skipped", "three"]
    assert parse_name_lines(lines) == ["one", "two", "three"]


def test_parse_name_lines_custom_comment_prefix() -> None:
    assert parse_name_lines(["; note", "#tag"], comment_prefix=";") == ["#tag"]


def test_split_extension() -> None:
    assert split_extension("photo.jpg") == ("photo", ".jpg")
    assert split_extension("archive.tar.gz") == ("archive.tar", ".gz")
    assert split_extension("Makefile") == ("Makefile", "")
    assert split_extension(".bashrc") == (".bashrc", "")


def test_build_rename_pairs_keeps_parent_and_extension() -> None:
    files = [FileEntry(Path("dir/a.txt")), FileEntry(Path("dir/b.tar.gz")), FileEntry(Path("dir/README"))]
    pairs = build_rename_pairs(["one", "two", "three"], files)
    assert pairs == [
        RenamePair(Path("dir/a.txt"), Path("dir/one.txt")),
        RenamePair(Path("dir/b.tar.gz"), Path("dir/two.gz")),
        RenamePair(Path("dir/README"), Path("dir/three")),
    ]


def test_build_rename_pairs_length_mismatch_raises() -> None:
    with pytest.raises(RuntimeError, match="same number of items"):
        build_rename_pairs(["one"], [])


@pytest.mark.parametrize("name", ["a/b", "a\\b", ".", "..", "bad\x00name"])
def test_validate_names_rejects_path_like_names(name: str) -> None:
    with pytest.raises(RuntimeError, match="invalid name"):
        validate_names(["ok", name])


def test_find_duplicate_destinations() -> None:
    pairs = [
        RenamePair(Path("d/a.txt"), Path("d/x.txt")),
        RenamePair(Path("d/b.txt"), Path("d/x.txt")),
        RenamePair(Path("d/c.jpg"), Path("d/x.jpg")),
    ]
    assert find_duplicate_destinations(pairs) == [Path("d/x.txt")]


def test_format_pair() -> None:
    pair = RenamePair(Path("d/a.txt"), Path("d/one.txt"))
    assert format_pair(pair) == f"{Path('d/a.txt')} --> {Path('d/one.txt')}"


def test_parse_name_lines_comment_prefix_only_at_line_start() -> None:
    assert parse_name_lines(["  #1 track", "#2 track", "   "]) == ["#1 track"]


def test_display_path_replaces_undecodable_bytes() -> None:
    path = Path(os.fsdecode(b"dir/\xff.txt"))

    assert display_path(path) == "dir/\ufffd.txt"
