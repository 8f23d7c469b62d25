"""Logic for rewriting a single link attribute value."""

import logging
import re
from urllib.parse import SplitResult, urlsplit

from relink.path_resolver import PathResolver

logger = logging.getLogger(__name__)

# Characters a URI reference may not contain unescaped
INVALID_URI_CHARS_RE = re.compile(r"[\s\x00-\x1f\x7f]")


class MalformedLinkError(ValueError):
    """Raised when a link attribute value is not a valid URI reference."""


def parse_link(value: str) -> SplitResult:
    """Parse a link attribute value strictly."""
    if INVALID_URI_CHARS_RE.search(value):
        msg = f"Invalid characters in link: {value!r}"
        raise MalformedLinkError(msg)
    try:
        return urlsplit(value)
    except ValueError as e:
        raise MalformedLinkError(str(e)) from e


def rewrite_link(value: str | None, resolver: PathResolver) -> str | None:
    """Rewrite a relative link to its absolute tree URL.

    Absolute links, fragment-only and query-only links, and malformed links
    come back unchanged.
    """
    if not value:
        return value

    try:
        parts = parse_link(value)
    except MalformedLinkError:
        logger.warning("Leaving malformed link untouched: %r", value)
        return value

    if parts.scheme or parts.netloc or not parts.path:
        return value

    rewritten = resolver.resolve(parts.path)
    # Keep empty query and fragment markers
    before_fragment, has_fragment, _ = value.partition("#")
    if "?" in before_fragment:
        rewritten += "?" + parts.query
    if has_fragment:
        rewritten += "#" + parts.fragment
    return rewritten
