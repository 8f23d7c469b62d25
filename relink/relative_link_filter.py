"""HTML filter that "fixes" relative links to files in a repository."""

import logging

from bs4 import BeautifulSoup

from relink.current_sha import current_sha
from relink.path_resolver import PathResolver
from relink.resolution_context import ResolutionContext
from relink.rewrite_link import rewrite_link
from relink.should_rewrite import should_rewrite

logger = logging.getLogger(__name__)

# tag name -> attribute holding the link
LINK_ATTRIBUTES = {
    "a": "href",
    "img": "src",
}


def filter_relative_links(html: str, context: ResolutionContext) -> str:
    """Rewrite relative anchor and image links in an HTML fragment."""
    if not should_rewrite(context):
        logger.info("Skipping relative links for %s", context.namespace)
        return html

    sha = current_sha(context)
    if sha is None:
        return html

    resolver = PathResolver(context, sha)
    soup = BeautifulSoup(html, "html.parser")
    for tag_name, attr in LINK_ATTRIBUTES.items():
        for el in soup.find_all(tag_name):
            value = el.get(attr)
            if not value:
                continue
            el[attr] = rewrite_link(value, resolver)
    return str(soup)
