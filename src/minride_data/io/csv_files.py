# io/csv_files.py
import csv
import os
import tempfile
from collections.abc import Iterable, Sequence
from pathlib import Path

from minride_data.errors import DatasetWriteError

DRIVERS_FILE = "drivers.csv"
CUSTOMERS_FILE = "customers.csv"
RIDES_FILE = "rides.csv"


def write_rows(fp, header: Sequence[str], rows: Iterable[Sequence[str]]) -> int:
    """Header line, then one comma-joined line per row. Returns the number of data rows."""
    # fields come from fixed word lists; QUOTE_NONE makes a stray comma an error
    writer = csv.writer(fp, lineterminator="\n", quoting=csv.QUOTE_NONE)
    writer.writerow(header)
    n = 0
    for row in rows:
        writer.writerow(row)
        n += 1
    return n


class DatasetWriter:
    """
    Stages each CSV file as a hidden temporary sibling and only renames the
    staged files into place on commit(). Leaving the context without a commit
    removes every staged file, so a failed run creates none of the targets.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self._staged: list[tuple[Path, Path]] = []  # (tmp, final)
        self._committed = False

    def __enter__(self):
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DatasetWriteError(self.output_dir, e.strerror or str(e)) from e
        if not os.access(self.output_dir, os.W_OK):
            raise DatasetWriteError(self.output_dir, "directory is not writable")
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self._committed:
            self.discard()
        return False

    def stage(self, filename: str, header: Sequence[str], rows: Iterable[Sequence[str]]) -> int:
        final = self.output_dir / filename
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.output_dir, prefix=f".{filename}.", suffix=".tmp")
        except OSError as e:
            raise DatasetWriteError(final, e.strerror or str(e)) from e
        tmp = Path(tmp_name)
        self._staged.append((tmp, final))
        try:
            with open(fd, "w", newline="", encoding="utf-8") as fp:
                return write_rows(fp, header, rows)
        except OSError as e:
            raise DatasetWriteError(final, e.strerror or str(e)) from e
        except csv.Error as e:
            raise DatasetWriteError(final, f"unwritable field: {e}") from e

    def commit(self) -> dict[str, Path]:
        """
        Move every staged file into place. Existing targets are parked as
        hidden backups first; if any rename fails the targets already moved are
        put back, so the directory ends up with all new files or all old ones.
        """
        moved: list[tuple[Path, Path | None]] = []  # (final, backup)
        for tmp, final in self._staged:
            try:
                backup = None
                if final.exists():
                    backup = final.with_name(f".{final.name}.bak")
                    os.replace(final, backup)
                moved.append((final, backup))
                os.replace(tmp, final)
            except OSError as e:
                lost = self._rollback(moved)
                reason = e.strerror or str(e)
                replaced = ", ".join(f.name for f, _ in moved if f != final) or "none"
                reason += f"; rolled back already replaced: {replaced}"
                if lost:
                    reason += f"; could not restore: {', '.join(lost)}"
                raise DatasetWriteError(final, reason) from e
        for _, backup in moved:
            if backup is not None:
                backup.unlink(missing_ok=True)
        self._committed = True
        self._staged.clear()
        return {final.name: final for final, _ in moved}

    @staticmethod
    def _rollback(moved: list[tuple[Path, Path | None]]) -> list[str]:
        lost: list[str] = []
        for final, backup in reversed(moved):
            try:
                if backup is not None:
                    os.replace(backup, final)
                else:
                    final.unlink(missing_ok=True)
            except OSError:
                lost.append(final.name)
        return lost

    def discard(self) -> None:
        for tmp, _ in self._staged:
            tmp.unlink(missing_ok=True)
        self._staged.clear()
