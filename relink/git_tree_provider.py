"""Tree provider backed by a local git repository."""

import logging
import subprocess
from collections.abc import Iterable
from pathlib import Path

from relink.is_image_path import is_image_path
from relink.load_config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class GitTreeProvider:
    """Answers tree lookups by running git plumbing commands in a repository."""

    def __init__(
        self,
        repo_path: Path | str,
        image_extensions: Iterable[str] | None = None,
    ) -> None:
        self.repo_path = Path(repo_path)
        if image_extensions is None:
            image_extensions = DEFAULT_CONFIG["image_extensions"]
        self.image_extensions = [ext.lower() for ext in image_extensions]

    def _git(self, *args: str) -> str | None:
        """Run a git command and return its stdout, or None if it fails."""
        cmd = ["git", *args]
        try:
            proc = subprocess.run(
                cmd,
                cwd=self.repo_path,
                check=True,
                capture_output=True,
                text=True,
                errors="surrogateescape",
            )
        except (subprocess.CalledProcessError, OSError) as e:
            logger.debug("git %s failed: %s", " ".join(args), e)
            return None
        return proc.stdout.strip()

    def exists(self) -> bool:
        if not self.repo_path.is_dir():
            return False
        return self._git("rev-parse", "--git-dir") is not None

    def is_empty(self) -> bool:
        # Empty means no branches at all; an unborn HEAD alone does not count
        return not self._git("for-each-ref", "--count=1", "refs/heads")

    def head_commit_id(self) -> str:
        sha = self._git("rev-parse", "HEAD")
        if sha is None:
            msg = f"Repository has no HEAD commit: {self.repo_path}"
            raise LookupError(msg)
        return sha

    def resolve_ref(self, ref: str) -> str | None:
        return self._git("rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}")

    def has_file(self, sha: str, path: str) -> bool:
        return self._git("cat-file", "-t", _object_name(sha, path)) == "blob"

    def has_directory(self, sha: str, path: str) -> bool:
        # ls-tree fails for blobs and missing paths; empty output is an empty tree
        return bool(self._git("ls-tree", _object_name(sha, path)))

    def is_image_file(self, sha: str, path: str) -> bool:
        return is_image_path(path, self.image_extensions)


def _object_name(sha: str, path: str) -> str:
    # <sha>:<path> is relative to the tree root only without a leading ./ or /
    return f"{sha}:{path.strip('/')}"
