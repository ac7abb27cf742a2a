"""Single-level and two-level file directories."""

from __future__ import annotations

from typing import Iterable

DEFAULT_CAPACITY = 20


class DirectoryFullError(Exception):
    """A directory has no room for another file."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


class SingleLevelDirectory:
    """One directory shared by everyone, holding up to ``capacity`` files."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._files: list[str] = []

    def create(self, name: str) -> None:
        """Add a file name; raise DirectoryFullError if there is no room."""
        if len(self._files) >= self.capacity:
            raise DirectoryFullError("Directory is full!")
        self._files.append(name)

    def search(self, name: str) -> bool:
        """Whether a file of this name exists."""
        return name in self._files

    def files(self) -> list[str]:
        """File names in creation order."""
        return list(self._files)


class TwoLevelDirectory:
    """A directory per user; users are addressed by 1-based number."""

    def __init__(self, users: Iterable[str], capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self.users = list(users)
        self._files: list[list[str]] = [[] for _ in self.users]

    def _directory(self, user: int) -> list[str]:
        if not 1 <= user <= len(self.users):
            raise ValueError(f"user number must be 1 to {len(self.users)}")
        return self._files[user - 1]

    def create(self, user: int, name: str) -> None:
        """Add a file to a user's directory."""
        directory = self._directory(user)
        if len(directory) >= self.capacity:
            raise DirectoryFullError("User directory is full!")
        directory.append(name)

    def search(self, user: int, name: str) -> bool:
        """Whether the user's directory holds a file of this name."""
        return name in self._directory(user)

    def files(self, user: int) -> list[str]:
        """The user's file names in creation order."""
        return list(self._directory(user))

    def listing(self) -> str:
        """Render every user's files, one section per user."""
        sections = []
        for user, files in zip(self.users, self._files):
            body = "\n".join(files) if files else "No files."
            sections.append(f"Files for user {user}:\n{body}")
        return "\n\n".join(sections)