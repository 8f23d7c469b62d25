"""Logic for picking the commit that links are resolved against."""

import logging

from relink.resolution_context import ResolutionContext

logger = logging.getLogger(__name__)


def current_sha(context: ResolutionContext) -> str | None:
    """Return the commit id for the context, or None if the ref is unknown."""
    if context.tree is None:
        return None
    if context.commit:
        return context.commit
    if context.ref:
        sha = context.tree.resolve_ref(context.ref)
        if sha is None:
            logger.warning("Ref %r does not resolve to a commit", context.ref)
        return sha
    try:
        return context.tree.head_commit_id()
    except LookupError:
        logger.warning("Repository has no head commit for %s", context.namespace)
        return None
