from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO

from renls.ports.name_source_port import NameSourcePort


class FileNameListReader(NameSourcePort):
    def __init__(self, file_path: str, encoding: str = "utf-8") -> None:
        self._file_path = Path(file_path)
        self._encoding = encoding

    def read_lines(self) -> list[str]:
        try:
            with self._file_path.open("r", encoding=self._encoding) as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise RuntimeError("unable to read file") from exc
        return _strip_bom(text).splitlines()


class StdinNameListReader(NameSourcePort):
    def __init__(self, stream: BinaryIO | None = None, encoding: str = "utf-8") -> None:
        self._stream = stream
        self._encoding = encoding

    def read_lines(self) -> list[str]:
        stream = self._stream if self._stream is not None else sys.stdin.buffer
        if stream.isatty():
            raise RuntimeError("stdin buffer is empty")
        try:
            text = stream.read().decode(self._encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise RuntimeError("unable to read stdin") from exc
        return _strip_bom(text).splitlines()


def _strip_bom(text: str) -> str:
    return text.removeprefix("\ufeff")
