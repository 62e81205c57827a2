from __future__ import annotations

from renls.domain.models import RenameFailure, RenamePair, RenameReport
from renls.domain.rename_logic import (
    build_rename_pairs,
    find_duplicate_destinations,
    format_pair,
    parse_name_lines,
    validate_names,
)
from renls.ports.filesystem_port import FilesystemPort
from renls.ports.name_source_port import NameSourcePort


class RenameService:
    def __init__(self, filesystem: FilesystemPort, comment_prefix: str = "#") -> None:
        self._filesystem = filesystem
        self._comment_prefix = comment_prefix

    def load_names(self, source: NameSourcePort) -> list[str]:
        return parse_name_lines(source.read_lines(), self._comment_prefix)

    def plan(self, dir_path: str, names: list[str]) -> list[RenamePair]:
        """
        Build the rename plan for a directory, failing before any mutation when the
        name list does not fit the directory contents.
        """
        files = self._filesystem.list_directory_files(dir_path)
        if len(names) != len(files):
            raise RuntimeError("file list and new name list do not have the same number of items")
        validate_names(names)

        pairs = build_rename_pairs(names, files)
        duplicates = find_duplicate_destinations(pairs)
        if duplicates:
            listed = ", ".join(f"\"{path}\"" for path in duplicates)
            raise RuntimeError(f"new name list maps several files to the same destination: {listed}")
        return pairs

    def preview(self, pairs: list[RenamePair]) -> list[str]:
        return [format_pair(pair) for pair in pairs]

    def apply(self, pairs: list[RenamePair]) -> RenameReport:
        report = RenameReport()
        for pair in pairs:
            try:
                self._filesystem.rename_file(pair.source, pair.destination)
            except (OSError, ValueError) as exc:
                reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
                report.failures.append(RenameFailure(pair=pair, reason=reason))
        return report
