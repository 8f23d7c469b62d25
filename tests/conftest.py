"""Shared fixtures for relative link resolution tests."""

import shutil
from pathlib import Path

import pytest

from relink.resolution_context import ResolutionContext
from fake_tree import FEATURE_SHA, HEAD_SHA, FakeTree
from git_repo import make_repo


@pytest.fixture
def tree() -> FakeTree:
    """A small repository with docs, nested API docs and an image."""
    return FakeTree(
        files={
            "README.md",
            "CHANGELOG",
            "doc/README.md",
            "doc/api/README.md",
            "doc/api/users.md",
            "doc/api/images/diagram.png",
            "doc/logo.JPG",
            "users.md",
        },
        refs={"master": HEAD_SHA, "feature": FEATURE_SHA},
    )


@pytest.fixture
def context(tree: FakeTree) -> ResolutionContext:
    """Context for a document at the repository root."""
    return ResolutionContext(tree=tree, namespace="gitlab-org/gitlab-test")


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A real git repository, skipped when git is not installed."""
    if shutil.which("git") is None:
        pytest.skip("git not found")
    return make_repo(tmp_path / "repo")
