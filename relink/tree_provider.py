"""Interface for read-only lookups into a versioned tree of files."""

from typing import Protocol


class TreeProvider(Protocol):
    """Answers existence and type questions about paths at a given commit."""

    def exists(self) -> bool: ...

    def is_empty(self) -> bool: ...

    def head_commit_id(self) -> str: ...

    def resolve_ref(self, ref: str) -> str | None:
        """Return the commit id a ref points at, or None if it does not exist."""
        ...

    def has_file(self, sha: str, path: str) -> bool: ...

    def has_directory(self, sha: str, path: str) -> bool:
        """Return True if the directory exists and has at least one entry."""
        ...

    def is_image_file(self, sha: str, path: str) -> bool: ...
