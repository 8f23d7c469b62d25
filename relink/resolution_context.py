"""Data model for the per-document link resolution context."""

from dataclasses import dataclass

from relink.tree_provider import TreeProvider


@dataclass(frozen=True)
class ResolutionContext:
    """Everything needed to resolve relative links found in one document."""

    tree: TreeProvider | None
    namespace: str  # Project path with namespace, e.g. group/project
    commit: str | None = None
    ref: str | None = None
    requested_path: str | None = None  # Tree path of the rendered document
    relative_url_root: str = "/"
    is_wiki: bool = False
    default_ref: str = "master"
