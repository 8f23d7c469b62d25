"""Gate deciding whether a document's links are rewritten at all."""

from relink.resolution_context import ResolutionContext


def should_rewrite(context: ResolutionContext) -> bool:
    """Wiki pages and projects without a populated repository are left alone."""
    if context.is_wiki or context.tree is None:
        return False
    return context.tree.exists() and not context.tree.is_empty()
