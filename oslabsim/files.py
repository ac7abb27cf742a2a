"""File handling: employee records, copying, permissions and simulated calls."""

from __future__ import annotations

import shutil
import struct
from dataclasses import astuple, dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator

NAME_SIZE = 20
MAX_RECORDS = 5
DEMO_TEXT = "Hello! This is a demo text.\n"

# id, NUL-padded name, single-precision salary
_RECORD = struct.Struct("<i20sf")


@dataclass(frozen=True)
class Employee:
    """One employee record as stored in an employee file."""

    id: int
    name: str
    salary: float

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Salary: {self.salary:.2f}"

    def _pack(self) -> bytes:
        encoded = self.name.encode()
        if len(encoded) >= NAME_SIZE or b"\0" in encoded:
            raise ValueError(f"name must be at most {NAME_SIZE - 1} bytes without NUL")
        try:
            return _RECORD.pack(self.id, encoded, self.salary)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def _unpack(cls, data: bytes) -> Employee:
        ident, raw_name, salary = _RECORD.unpack(data)
        return cls(ident, raw_name.split(b"\0", 1)[0].decode(), salary)


class EmployeeFile:
    """A file of fixed-size employee records with random access by number.

    Opening a path truncates it, so every instance starts empty.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file: BinaryIO = open(self.path, "w+b")

    def __enter__(self) -> EmployeeFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def append(self, employee: Employee) -> None:
        """Write a record at the end of the file."""
        data = employee._pack()
        self._file.seek(0, 2)
        self._file.write(data)

    def __iter__(self) -> Iterator[Employee]:
        self._file.seek(0)
        while True:
            data = self._file.read(_RECORD.size)
            if len(data) < _RECORD.size:
                return
            yield Employee._unpack(data)

    def __len__(self) -> int:
        self._file.seek(0, 2)
        return self._file.tell() // _RECORD.size

    def record(self, number: int) -> Employee:
        """Read the record with the given 1-based number."""
        if not 1 <= number <= len(self):
            raise IndexError("Invalid record number!")
        self._file.seek((number - 1) * _RECORD.size)
        return Employee._unpack(self._file.read(_RECORD.size))

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()


def copy_file(source: str | Path, destination: str | Path) -> None:
    """Copy the contents of one file to another, replacing the destination."""
    shutil.copyfile(source, destination)


def file_management_demo(directory: str | Path) -> list[str]:
    """Create, write, read, rename and delete a file in ``directory``.

    Returns the log of the operations.
    """
    base = Path(directory)
    sample = base / "sample.txt"
    renamed = base / "renamed.txt"

    sample.write_text(DEMO_TEXT)
    log = ["[create/write] sample.txt created & data written.", "[read] Contents of sample.txt:"]
    log.extend(sample.read_text().splitlines())

    sample.rename(renamed)
    log.append("[rename] sample.txt → renamed.txt")
    renamed.unlink()
    log.append("[delete] renamed.txt removed successfully.")
    return log


@dataclass(frozen=True)
class Permissions:
    """Read, write and execute bits for owner, group and others."""

    owner_read: bool = False
    owner_write: bool = False
    owner_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False

    @classmethod
    def from_octal(cls, mode: int) -> Permissions:
        """Build permissions from a mode such as ``0o754``."""
        if not 0 <= mode <= 0o777:
            raise ValueError("mode must be between 0 and 0o777")
        return cls(*(bool(mode >> shift & 1) for shift in range(8, -1, -1)))

    def symbolic(self) -> str:
        """Render as ``rwxr-xr--``."""
        return "".join(
            letter if enabled else "-"
            for letter, enabled in zip("rwx" * 3, astuple(self))
        )

    def octal(self) -> int:
        """The permissions as a numeric mode."""
        return sum(1 << (8 - bit) for bit, enabled in enumerate(astuple(self)) if enabled)


class SequentialRecords:
    """Up to five records that can only be reached by reading from the start."""

    def __init__(self, items: Iterable[str]) -> None:
        self.records = tuple(items)
        if len(self.records) > MAX_RECORDS:
            raise ValueError(f"at most {MAX_RECORDS} records are allowed")

    def __len__(self) -> int:
        return len(self.records)

    def read_up_to(self, number: int) -> list[tuple[int, str]]:
        """Read records 1..number in order; the last one is the record asked for."""
        if not 1 <= number <= len(self.records):
            raise IndexError("Invalid record number.")
        return list(enumerate(self.records[:number], start=1))


def system_call_demo(name: str = "demo.txt", size: int = 256, flags: int = 1) -> list[str]:
    """Log of simulated open, stat, seek, fcntl and directory calls."""
    return [
        f"[open] File '{name}' opened with flags = {flags}",
        f"[stat] File: {name} | Size: {size} bytes | Flags: {flags}",
        "[seek] Moving file pointer by 10 bytes (simulation)",
        "[fcntl] Performing command 2 (simulation)",
        "[opendir] Opening current directory (simulation)",
        "[readdir] file1.txt",
        "[readdir] data.c",
        "[readdir] report.pdf",
    ]