"""Tests for the HTML relative link filter."""

from dataclasses import replace

from bs4 import BeautifulSoup

from relink.relative_link_filter import filter_relative_links
from relink.resolution_context import ResolutionContext
from fake_tree import FakeTree

NS = "/gitlab-org/gitlab-test"

HTML = """<div>
<p><a href="users.md">Users</a> <a href="https://example.com">Ext</a></p>
<p><a href="#top">Top</a> <a>No href</a> <a href="">Empty</a></p>
<img src="images/diagram.png" alt="Diagram">
<img src="http://example.com/x.png">
</div>"""


def links(html: str) -> dict[str, str | None]:
    """Map link text (or image alt) to its target."""
    soup = BeautifulSoup(html, "html.parser")
    result: dict[str, str | None] = {a.text: a.get("href") for a in soup.find_all("a")}
    for img in soup.find_all("img"):
        result[img.get("alt") or "img"] = img.get("src")
    return result


def test_rewrites_links_and_images(context: ResolutionContext) -> None:
    """Relative anchors and images are rewritten, others are kept."""
    ctx = replace(context, requested_path="doc/api/README.md")
    out = links(filter_relative_links(HTML, ctx))
    assert out["Users"] == f"{NS}/blob/master/doc/api/users.md"
    assert out["Ext"] == "https://example.com"
    assert out["Top"] == "#top"
    assert out["No href"] is None
    assert out["Empty"] == ""
    assert out["Diagram"] == f"{NS}/raw/master/doc/api/images/diagram.png"
    assert out["img"] == "http://example.com/x.png"


def test_ref_in_urls(context: ResolutionContext) -> None:
    """The viewed ref is used in the rewritten URLs."""
    out = links(filter_relative_links(HTML, replace(context, ref="feature")))
    assert out["Users"] == f"{NS}/blob/feature/users.md"


def test_wiki_document_unchanged(context: ResolutionContext) -> None:
    """Wiki documents are passed through as the same string."""
    assert filter_relative_links(HTML, replace(context, is_wiki=True)) is HTML


def test_empty_repository_unchanged(context: ResolutionContext) -> None:
    """Documents of empty or missing repositories are passed through."""
    assert filter_relative_links(HTML, replace(context, tree=FakeTree())) is HTML
    assert filter_relative_links(HTML, replace(context, tree=None)) is HTML


def test_unknown_ref_unchanged(context: ResolutionContext) -> None:
    """A ref that does not resolve leaves the document untouched."""
    assert filter_relative_links(HTML, replace(context, ref="gone")) is HTML


def test_no_lookups_when_skipped(tree: FakeTree, context: ResolutionContext) -> None:
    """Skipped documents never reach the tree lookups."""
    filter_relative_links(HTML, replace(context, is_wiki=True))
    assert tree.lookups == []
