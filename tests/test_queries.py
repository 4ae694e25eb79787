"""Tests for the GraphQL documents."""

import re

import pytest

from hubgraph import queries

DISCUSSION_DOCUMENTS = [
    "DISCUSSION_FIELDS",
    "DISCUSSIONS_QUERY",
    "DISCUSSION_BY_ID_QUERY",
    "DISCUSSION_BY_NUMBER_QUERY",
    "CREATE_DISCUSSION_MUTATION",
    "UPDATE_DISCUSSION_MUTATION",
    "LOCK_MUTATION",
    "UNLOCK_MUTATION",
    "ADD_UPVOTE_MUTATION",
    "REMOVE_UPVOTE_MUTATION",
    "MARK_ANSWER_MUTATION",
    "UNMARK_ANSWER_MUTATION",
]


@pytest.mark.parametrize("name", DISCUSSION_DOCUMENTS)
def test_discussion_documents_never_select_state(name: str) -> None:
    """Test that discussion selections leave lifecycle status to be derived."""
    document = getattr(queries, name)

    assert re.search(r"\bstate\b", document) is None


def test_project_items_select_issue_state() -> None:
    """Test that issue and pull request content keeps its own state."""
    assert re.search(r"\bstate\b", queries.PROJECT_ITEM_FIELDS)
