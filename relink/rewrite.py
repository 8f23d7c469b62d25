"""Single-link entry point for relative link resolution."""

from relink.current_sha import current_sha
from relink.path_resolver import PathResolver
from relink.resolution_context import ResolutionContext
from relink.should_rewrite import should_rewrite


def rewrite(raw_path: str, context: ResolutionContext) -> str:
    """Return the absolute tree URL path for a relative path.

    The input comes back unchanged when the context does not allow rewriting
    (wiki page, missing or empty repository) or its ref does not resolve.
    """
    if not raw_path or not should_rewrite(context):
        return raw_path
    sha = current_sha(context)
    if sha is None:
        return raw_path
    return PathResolver(context, sha).resolve(raw_path)
