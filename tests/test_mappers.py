"""Tests for node-to-entity mapping."""

from datetime import datetime, timezone

import pytest

from hubgraph.errors import ValidationError
from hubgraph.mappers import (
    map_comment,
    map_discussion,
    map_field,
    map_project,
    map_project_item,
    map_view_fields,
)

DISCUSSION_NODE = {
    "id": "D_kwDOA",
    "number": 7,
    "title": "Release plan",
    "body": "What ships next?",
    "url": "https://github.com/octo/repo/discussions/7",
    "locked": True,
    "createdAt": "2024-05-01T10:00:00Z",
    "updatedAt": "2024-05-02T10:00:00Z",
    "upvoteCount": 3,
    "viewerHasUpvoted": False,
    "answerChosenAt": None,
    "comments": {"totalCount": 4},
    "category": {"id": "DIC_1", "name": "Q&A", "slug": "q-a", "isAnswerable": True},
    "author": {"__typename": "User", "login": "octocat", "id": "U_1"},
    "labels": {"nodes": [{"id": "LA_1", "name": "planning", "color": "ededed"}]},
    "answer": None,
}


def test_map_discussion() -> None:
    """Test mapping a full discussion node."""
    discussion = map_discussion(DISCUSSION_NODE)

    assert discussion.id == "D_kwDOA"
    assert discussion.number == 7
    assert discussion.status == "LOCKED"
    assert discussion.category_id == "DIC_1"
    assert discussion.category.is_answerable is True
    assert discussion.author.login == "octocat"
    assert discussion.comments_total_count == 4
    assert [label.name for label in discussion.labels] == ["planning"]
    assert discussion.created_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert discussion.is_answered is False


def test_mapping_is_idempotent() -> None:
    """Test that mapping the same node twice yields equal entities."""
    assert map_discussion(DISCUSSION_NODE) == map_discussion(DISCUSSION_NODE)


def test_deleted_author_maps_to_none() -> None:
    """Test that a ghost author stays None."""
    discussion = map_discussion({**DISCUSSION_NODE, "author": None})
    assert discussion.author is None


def test_map_discussion_requires_id() -> None:
    """Test that a node without an id is rejected."""
    with pytest.raises(ValidationError):
        map_discussion({"number": 1})


def test_map_discussion_rejects_bad_types() -> None:
    """Test that a malformed flag is rejected rather than coerced."""
    with pytest.raises(ValidationError):
        map_discussion({**DISCUSSION_NODE, "locked": "yes"})


def test_map_comment_parent() -> None:
    """Test that replyTo wins over the parent supplied by the caller."""
    reply = map_comment({"id": "DC_2", "body": "+1", "replyTo": {"id": "DC_1"}}, parent_id="DC_x")
    top = map_comment({"id": "DC_1", "body": "hi", "replyTo": None})
    nested = map_comment({"id": "DC_3", "body": "?"}, parent_id="DC_1")

    assert reply.parent_id == "DC_1"
    assert top.parent_id is None
    assert nested.parent_id == "DC_1"


@pytest.mark.parametrize(("closed", "status"), [(True, "CLOSED"), (False, "OPEN")])
def test_map_project_status(closed: bool, status: str) -> None:
    """Test that project status is computed from closed."""
    project = map_project(
        {
            "id": "PVT_1",
            "number": 2,
            "title": "Roadmap",
            "closed": closed,
            "public": False,
            "owner": {"__typename": "Organization", "id": "O_1", "login": "octo-org"},
        }
    )

    assert project.status == status
    assert project.public is False
    assert project.owner.login == "octo-org"


def test_map_project_item() -> None:
    """Test mapping an item whose content is a pull request."""
    item = map_project_item(
        {
            "id": "PVTI_1",
            "isArchived": False,
            "content": {"__typename": "PullRequest", "id": "PR_1", "title": "Fix", "state": "OPEN"},
        },
        project_id="PVT_1",
    )

    assert item.project_id == "PVT_1"
    assert item.content_type == "PullRequest"
    assert item.title == "Fix"


def test_map_field_options() -> None:
    """Test mapping a single-select field."""
    field = map_field(
        {
            "id": "F_1",
            "name": "Status",
            "dataType": "SINGLE_SELECT",
            "options": [{"id": "o1", "name": "Todo"}, {"id": "o2", "name": "Done"}],
        }
    )

    assert [option.name for option in field.options] == ["Todo", "Done"]
    assert field.is_built_in


def test_map_view_fields_visibility() -> None:
    """Test that visibility comes from the view's own field list and width stays unset."""
    project_fields = [
        {"id": "F_1", "name": "Title", "dataType": "TITLE"},
        {"id": "F_2", "name": "Estimate", "dataType": "NUMBER"},
        {},
    ]
    visible = [{"id": "F_1", "name": "Title", "dataType": "TITLE"}]

    configurations = map_view_fields("PVTV_1", project_fields, visible)

    assert [(c.field_id, c.is_visible) for c in configurations] == [("F_1", True), ("F_2", False)]
    assert all(c.width is None for c in configurations)
