"""Tests for domain models and derived fields."""

from dataclasses import FrozenInstanceError, replace

import pytest

from hubgraph.models import (
    CommentNode,
    Discussion,
    DiscussionComment,
    Project,
    ProjectField,
    ProjectItem,
    ViewFieldConfiguration,
    content_type_of,
)


def test_discussion_creation() -> None:
    """Test discussion creation with defaults."""
    discussion = Discussion(id="D_1", number=1, title="Hello")
    assert discussion.body == ""
    assert discussion.labels == ()
    assert discussion.category_id is None
    assert discussion.status == "OPEN"
    assert discussion.is_answered is False


@pytest.mark.parametrize(("locked", "status"), [(True, "LOCKED"), (False, "OPEN")])
def test_discussion_status_follows_locked(locked: bool, status: str) -> None:
    """Test that status is derived from the locked flag."""
    discussion = Discussion(id="D_1", number=1, title="t", locked=locked)
    assert discussion.status == status


@pytest.mark.parametrize(("closed", "status"), [(True, "CLOSED"), (False, "OPEN")])
def test_project_status_follows_closed(closed: bool, status: str) -> None:
    """Test that status is derived from the closed flag."""
    project = Project(id="PVT_1", number=1, title="Roadmap", closed=closed)
    assert project.status == status


def test_status_is_never_stale() -> None:
    """Test that status tracks the source flag on copies."""
    discussion = Discussion(id="D_1", number=1, title="t")
    assert replace(discussion, locked=True).status == "LOCKED"


def test_entities_are_immutable() -> None:
    """Test that mapped entities cannot be mutated."""
    project = Project(id="PVT_1", number=1, title="Roadmap")
    with pytest.raises(FrozenInstanceError):
        project.closed = True  # type: ignore[misc]


@pytest.mark.parametrize(
    ("typename", "url", "expected"),
    [
        ("Issue", None, "Issue"),
        (None, "https://github.com/o/r/pull/3", "PullRequest"),
        (None, "https://github.com/o/r/issues/3", "Issue"),
        (None, "https://example.com/draft", "DraftIssue"),
        (None, None, None),
    ],
)
def test_content_type(typename: str | None, url: str | None, expected: str | None) -> None:
    """Test project item content type derivation."""
    assert content_type_of(typename, url) == expected
    assert ProjectItem(id="PVTI_1", content_typename=typename, url=url).content_type == expected


def test_built_in_fields() -> None:
    """Test built-in field detection is case-insensitive."""
    assert ProjectField(id="F1", name="Status", data_type="SINGLE_SELECT").is_built_in
    assert not ProjectField(id="F2", name="Estimate", data_type="NUMBER").is_built_in
    assert ViewFieldConfiguration("V1", "F1", "Title", "TITLE", True).is_built_in


def test_comment_node_walk_depth_first() -> None:
    """Test that walk visits a subtree depth-first in sibling order."""
    leaf = CommentNode(DiscussionComment(id="A1a"))
    root = CommentNode(
        DiscussionComment(id="A"),
        [CommentNode(DiscussionComment(id="A1"), [leaf]), CommentNode(DiscussionComment(id="A2"))],
    )

    assert [node.id for node in root.walk()] == ["A", "A1", "A1a", "A2"]


def test_comment_node_has_more_replies() -> None:
    """Test that only a known total larger than the loaded replies counts as more."""
    loaded = [CommentNode(DiscussionComment(id="A1")), CommentNode(DiscussionComment(id="A2"))]

    assert not CommentNode(DiscussionComment(id="A"), loaded).has_more_replies
    assert not CommentNode(DiscussionComment(id="A"), loaded, total_reply_count=2).has_more_replies
    assert CommentNode(DiscussionComment(id="A"), loaded, total_reply_count=3).has_more_replies
