"""Logic for resolving a relative link against the document's own directory."""

from relink.path_type import TREE, path_type
from relink.tree_provider import TreeProvider


def build_nested_path(
    path: str,
    request_path: str | None,
    tree: TreeProvider,
    sha: str,
) -> str | None:
    """Build the tree path a link most likely refers to.

    Covers links that reference files in the same directory as the document.
    At doc/api/README.md a link to users.md becomes doc/api/users.md: the
    document's own file name is replaced. At doc/api (the README shown below
    the tree view) the link is appended, giving doc/api/users.md as well.
    """
    if not path:
        return request_path
    if request_path is None:
        return path

    parts = request_path.split("/")
    if path_type(tree, sha, request_path) != TREE:
        parts.pop()
    parts.append(path)
    return "/".join(p for p in parts if p)
