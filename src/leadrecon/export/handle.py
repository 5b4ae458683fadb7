"""
Handle: a downloadable CSV backed by a temporary file.

A handle is created when a result becomes available and must be released
when the result is replaced or its consumer goes away.
"""
from __future__ import annotations

import os
import shutil
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Dict, List, Optional

from .csv_text import serialize_to_delimited_text


class ExportReleasedError(RuntimeError):
    """Raised when a released export handle is used."""


class ExportHandle:
    def __init__(self, path: Path, filename: str):
        self.path = Path(path)
        self.filename = filename
        self.released = False

    def __repr__(self) -> str:
        state = "released" if self.released else str(self.path)
        return f"ExportHandle({self.filename!r}, {state})"

    def _check_alive(self) -> None:
        if self.released:
            raise ExportReleasedError(f"Export {self.filename} has been released")

    def read_text(self) -> str:
        self._check_alive()
        return self.path.read_text(encoding="utf-8")

    def save_to(self, dest: Path) -> Path:
        """Copy the export to dest; a directory receives it under filename."""
        self._check_alive()
        dest = Path(dest)
        if dest.is_dir():
            dest = dest / self.filename
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.path, dest)
        return dest

    def release(self) -> None:
        if self.released:
            return
        self.released = True
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass

    def __enter__(self) -> "ExportHandle":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()


def create_export(
    dataset: List[Dict[str, Any]],
    filename: str,
    directory: Optional[Path] = None,
) -> ExportHandle:
    content = serialize_to_delimited_text(dataset)
    if directory is not None:
        Path(directory).mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(
        "w",
        encoding="utf-8",
        dir=directory,
        prefix="leadrecon_",
        suffix=".csv",
        delete=False,
        newline="",
    ) as tmp:
        tmp.write(content)
        tmp_path = Path(tmp.name)
    return ExportHandle(tmp_path, filename)
