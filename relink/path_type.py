"""Classification of tree paths into the URL segment used to browse them."""

from relink.tree_provider import TreeProvider

TREE = "tree"
BLOB = "blob"
RAW = "raw"


def path_type(tree: TreeProvider, sha: str, path: str) -> str:
    """Check if the path is pointing to a directory (tree) or a file (blob).

    e.g. doc/api is a directory and doc/README.md is a file. Image files are
    served raw. Paths the tree does not know about are treated as files.
    """
    if tree.has_directory(sha, path):
        return TREE
    if tree.has_file(sha, path) and tree.is_image_file(sha, path):
        return RAW
    return BLOB
