"""Resolution of relative link paths into absolute, browsable tree URLs."""

import logging
import re

from relink.build_nested_path import build_nested_path
from relink.path_type import path_type
from relink.resolution_context import ResolutionContext
from relink.tree_provider import TreeProvider

logger = logging.getLogger(__name__)

SEPARATOR_RUN_RE = re.compile(r"/{2,}")


class PathResolver:
    """Turns a relative link path into a namespace/type/ref URL path.

    One resolver serves every link of a document; it keeps no state between
    calls besides the context and the commit the lookups are made against.
    """

    def __init__(self, context: ResolutionContext, current_sha: str):
        if context.tree is None:
            msg = "PathResolver requires a tree provider"
            raise ValueError(msg)
        self.context = context
        self.tree: TreeProvider = context.tree
        self.current_sha = current_sha

    @property
    def ref(self) -> str:
        # Without a ref the default branch is assumed
        return self.context.ref or self.context.default_ref

    def resolve(self, path: str) -> str:
        file_path = self.relative_file_path(path)
        segments = [
            self.context.relative_url_root or "/",
            self.context.namespace,
            self.path_type(file_path),
            self.ref,
            file_path,
        ]
        resolved = SEPARATOR_RUN_RE.sub("/", "/".join(segments))
        if len(resolved) > 1:
            resolved = resolved.rstrip("/")
        logger.debug("Resolved %r to %r", path, resolved)
        return resolved

    def relative_file_path(self, path: str) -> str:
        nested_path = build_nested_path(
            path, self.context.requested_path, self.tree, self.current_sha
        )
        return nested_path if self.file_exists(nested_path) else path

    def file_exists(self, path: str | None) -> bool:
        if path is None:
            return False
        return self.tree.has_file(self.current_sha, path) or self.tree.has_directory(
            self.current_sha, path
        )

    def path_type(self, path: str) -> str:
        return path_type(self.tree, self.current_sha, path)
