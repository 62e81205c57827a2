from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, order=True)
class FileEntry:
    path: Path


@dataclass(frozen=True)
class RenamePair:
    source: Path
    destination: Path


@dataclass
class RenameFailure:
    pair: RenamePair
    reason: str


@dataclass
class RenameReport:
    failures: list[RenameFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
