"""Rewrite relative links in rendered HTML to absolute repository URLs."""

import argparse
import logging
import sys
from pathlib import Path

from relink.git_tree_provider import GitTreeProvider
from relink.load_config import load_config
from relink.relative_link_filter import filter_relative_links
from relink.resolution_context import ResolutionContext


def build_context(args: argparse.Namespace, config: dict) -> ResolutionContext:
    """Build the resolution context from CLI arguments and configuration."""
    tree = GitTreeProvider(args.repo, config["image_extensions"])
    return ResolutionContext(
        tree=tree,
        namespace=args.namespace,
        commit=args.commit,
        ref=args.ref,
        requested_path=args.requested_path,
        relative_url_root=config["relative_url_root"],
        is_wiki=args.wiki,
        default_ref=config["default_ref"],
    )


def run(args: argparse.Namespace) -> int:
    """Filter one HTML document."""
    config = load_config(args.config)
    level = "DEBUG" if args.verbose else str(config["logging"]["level"]).upper()
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
    )

    if args.input:
        if not args.input.exists():
            msg = f"Input file not found: {args.input}"
            raise SystemExit(msg)
        html = args.input.read_text(encoding="utf-8")
    else:
        html = sys.stdin.read()

    context = build_context(args, config)
    out = filter_relative_links(html, context)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(out, encoding="utf-8")
    else:
        sys.stdout.write(out)
    return 0


def main() -> int:
    """Run the link rewriting CLI."""
    ap = argparse.ArgumentParser(
        description=(
            "Rewrite relative anchor and image links in rendered HTML to "
            "absolute tree/blob/raw URLs of a git repository."
        ),
    )
    ap.add_argument("repo", type=Path, help="Path to the git repository")
    ap.add_argument(
        "namespace",
        help="Project path with namespace used in URLs, e.g. group/project",
    )
    ap.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="HTML file to filter (default: stdin)",
    )
    ap.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the filtered HTML here (default: stdout)",
    )
    ap.add_argument("--ref", help="Branch or tag the document is viewed at")
    ap.add_argument("--commit", help="Commit id the document is viewed at")
    ap.add_argument(
        "--requested-path",
        help="Tree path of the rendered document, e.g. doc/api/README.md",
    )
    ap.add_argument(
        "--wiki",
        action="store_true",
        help="The document is a wiki page; leave links untouched",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args()
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
