"""Conversion of raw GraphQL nodes into domain entities.

Every ``map_*`` function is pure: no I/O, no hidden state, and mapping the
same node twice yields equal entities. Derived fields (``status`` and
friends) are never read from the node; they are computed by the entity from
its source flags.
"""

from datetime import datetime
from typing import Any

import structlog

from hubgraph.errors import ValidationError
from hubgraph.models import (
    Author,
    Discussion,
    DiscussionCategory,
    DiscussionComment,
    Label,
    Project,
    ProjectField,
    ProjectFieldOption,
    ProjectItem,
    ProjectOwner,
    ProjectView,
    ViewFieldConfiguration,
    Viewer,
    closable_status,
    content_type_of,
    is_built_in_field,
    lockable_status,
)

logger = structlog.get_logger()

__all__ = [
    "closable_status",
    "content_type_of",
    "is_built_in_field",
    "lockable_status",
    "map_author",
    "map_category",
    "map_comment",
    "map_discussion",
    "map_field",
    "map_label",
    "map_owner",
    "map_project",
    "map_project_item",
    "map_view",
    "map_view_fields",
    "map_viewer",
]


def _require_node(node: Any, kind: str) -> dict[str, Any]:
    if not isinstance(node, dict):
        raise ValidationError(f"Malformed {kind} node: expected an object, got {type(node).__name__}")
    return node


def _require_str(node: dict[str, Any], key: str, kind: str) -> str:
    value = node.get(key)
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Malformed {kind} node: missing '{key}'")
    return value


def _opt_str(node: dict[str, Any], key: str) -> str | None:
    value = node.get(key)
    return value if isinstance(value, str) else None


def _bool(node: dict[str, Any], key: str, kind: str, default: bool = False) -> bool:
    value = node.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"Malformed {kind} node: '{key}' must be a boolean, got {value!r}")
    return value


def _int(node: dict[str, Any], key: str, kind: str, default: int = 0) -> int:
    value = node.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Malformed {kind} node: '{key}' must be an integer, got {value!r}")
    return value


def _datetime(node: dict[str, Any], key: str, kind: str) -> datetime | None:
    value = node.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Malformed {kind} node: '{key}' must be an ISO-8601 string")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValidationError(f"Malformed {kind} node: '{key}' is not ISO-8601: {value!r}") from e


def _total_count(node: dict[str, Any], key: str) -> int:
    connection = node.get(key)
    if isinstance(connection, dict) and isinstance(connection.get("totalCount"), int):
        return connection["totalCount"]
    return 0


def map_author(node: dict[str, Any] | None) -> Author | None:
    """Map an actor; deleted accounts come back as null."""
    if node is None:
        return None
    node = _require_node(node, "author")
    return Author(
        login=_require_str(node, "login", "author"),
        id=_opt_str(node, "id"),
        avatar_url=_opt_str(node, "avatarUrl"),
        url=_opt_str(node, "url"),
        type=_opt_str(node, "__typename"),
    )


def map_label(node: dict[str, Any]) -> Label:
    node = _require_node(node, "label")
    return Label(
        id=_require_str(node, "id", "label"),
        name=_require_str(node, "name", "label"),
        color=_opt_str(node, "color"),
        description=_opt_str(node, "description"),
        url=_opt_str(node, "url"),
    )


def map_category(node: dict[str, Any]) -> DiscussionCategory:
    node = _require_node(node, "category")
    return DiscussionCategory(
        id=_require_str(node, "id", "category"),
        name=_require_str(node, "name", "category"),
        slug=_opt_str(node, "slug"),
        description=_opt_str(node, "description"),
        emoji=_opt_str(node, "emoji"),
        emoji_html=_opt_str(node, "emojiHTML"),
        is_answerable=_bool(node, "isAnswerable", "category"),
        created_at=_datetime(node, "createdAt", "category"),
        updated_at=_datetime(node, "updatedAt", "category"),
    )


def map_comment(node: dict[str, Any], parent_id: str | None = None) -> DiscussionComment:
    """Map a discussion comment or reply.

    The parent is taken from ``replyTo`` when the node carries it, otherwise
    from ``parent_id``.
    """
    node = _require_node(node, "comment")
    reply_to = node.get("replyTo")
    if isinstance(reply_to, dict) and reply_to.get("id"):
        parent_id = reply_to["id"]
    return DiscussionComment(
        id=_require_str(node, "id", "comment"),
        body=_opt_str(node, "body") or "",
        body_html=_opt_str(node, "bodyHTML"),
        url=_opt_str(node, "url"),
        author=map_author(node.get("author")),
        created_at=_datetime(node, "createdAt", "comment"),
        updated_at=_datetime(node, "updatedAt", "comment"),
        upvote_count=_int(node, "upvoteCount", "comment"),
        viewer_has_upvoted=_bool(node, "viewerHasUpvoted", "comment"),
        is_answer=_bool(node, "isAnswer", "comment"),
        is_minimized=_bool(node, "isMinimized", "comment"),
        minimized_reason=_opt_str(node, "minimizedReason"),
        parent_id=parent_id,
    )


def map_discussion(node: dict[str, Any]) -> Discussion:
    node = _require_node(node, "discussion")
    logger.debug("Mapping discussion node", discussion_id=node.get("id"))

    labels = node.get("labels") or {}
    category = node.get("category")
    answer = node.get("answer")
    return Discussion(
        id=_require_str(node, "id", "discussion"),
        number=_int(node, "number", "discussion"),
        title=_opt_str(node, "title") or "",
        body=_opt_str(node, "body") or "",
        url=_opt_str(node, "url"),
        locked=_bool(node, "locked", "discussion"),
        category=map_category(category) if category is not None else None,
        author=map_author(node.get("author")),
        created_at=_datetime(node, "createdAt", "discussion"),
        updated_at=_datetime(node, "updatedAt", "discussion"),
        upvote_count=_int(node, "upvoteCount", "discussion"),
        viewer_has_upvoted=_bool(node, "viewerHasUpvoted", "discussion"),
        comments_total_count=_total_count(node, "comments"),
        labels=tuple(map_label(label) for label in labels.get("nodes") or [] if label is not None),
        answer=map_comment(answer) if answer is not None else None,
        answer_chosen_at=_datetime(node, "answerChosenAt", "discussion"),
    )


def map_owner(node: dict[str, Any]) -> ProjectOwner:
    node = _require_node(node, "owner")
    return ProjectOwner(
        id=_require_str(node, "id", "owner"),
        login=_require_str(node, "login", "owner"),
        type=_opt_str(node, "__typename"),
    )


def map_viewer(node: dict[str, Any]) -> Viewer:
    node = _require_node(node, "viewer")
    return Viewer(
        login=_require_str(node, "login", "viewer"),
        id=_opt_str(node, "id"),
        project_count=_total_count(node, "projectsV2"),
    )


def map_project(node: dict[str, Any]) -> Project:
    node = _require_node(node, "project")
    logger.debug("Mapping project node", project_id=node.get("id"))

    owner = node.get("owner")
    public = node.get("public")
    return Project(
        id=_require_str(node, "id", "project"),
        number=_int(node, "number", "project"),
        title=_opt_str(node, "title") or "",
        url=_opt_str(node, "url"),
        closed=_bool(node, "closed", "project"),
        short_description=_opt_str(node, "shortDescription"),
        readme=_opt_str(node, "readme"),
        public=_bool(node, "public", "project") if public is not None else None,
        owner=map_owner(owner) if isinstance(owner, dict) and owner.get("id") else None,
        created_at=_datetime(node, "createdAt", "project"),
        updated_at=_datetime(node, "updatedAt", "project"),
    )


def map_project_item(node: dict[str, Any], project_id: str | None = None) -> ProjectItem:
    node = _require_node(node, "project item")
    content = node.get("content") or {}
    project = node.get("project") or {}
    return ProjectItem(
        id=_require_str(node, "id", "project item"),
        project_id=_opt_str(project, "id") or project_id,
        content_id=_opt_str(content, "id"),
        content_typename=_opt_str(content, "__typename"),
        title=_opt_str(content, "title"),
        body=_opt_str(content, "body"),
        state=_opt_str(content, "state"),
        url=_opt_str(content, "url"),
        is_archived=_bool(node, "isArchived", "project item"),
        created_at=_datetime(node, "createdAt", "project item"),
        updated_at=_datetime(node, "updatedAt", "project item"),
    )


def map_field(node: dict[str, Any]) -> ProjectField:
    node = _require_node(node, "field")
    options = node.get("options") or []
    return ProjectField(
        id=_require_str(node, "id", "field"),
        name=_require_str(node, "name", "field"),
        data_type=_opt_str(node, "dataType") or "",
        options=tuple(
            ProjectFieldOption(
                id=_require_str(option, "id", "field option"),
                name=_require_str(option, "name", "field option"),
                color=_opt_str(option, "color"),
            )
            for option in options
        ),
    )


def map_view(node: dict[str, Any], project_id: str | None = None) -> ProjectView:
    node = _require_node(node, "view")
    project = node.get("project") or {}
    return ProjectView(
        id=_require_str(node, "id", "view"),
        number=_int(node, "number", "view"),
        name=_opt_str(node, "name") or "",
        layout=_opt_str(node, "layout"),
        filter=_opt_str(node, "filter"),
        project_id=_opt_str(project, "id") or project_id,
        created_at=_datetime(node, "createdAt", "view"),
        updated_at=_datetime(node, "updatedAt", "view"),
    )


def map_view_fields(
    view_id: str,
    project_fields: list[dict[str, Any]],
    visible_fields: list[dict[str, Any]],
) -> list[ViewFieldConfiguration]:
    """Pair every project field with its visibility in one view.

    A field is visible when the view's own field list contains it. Widths
    are not exposed remotely and stay unset.
    """
    visible_ids = {node.get("id") for node in visible_fields if isinstance(node, dict)}
    configurations = []
    for node in project_fields:
        if not node:
            continue
        project_field = map_field(node)
        configurations.append(
            ViewFieldConfiguration(
                view_id=view_id,
                field_id=project_field.id,
                field_name=project_field.name,
                data_type=project_field.data_type,
                is_visible=project_field.id in visible_ids,
            )
        )
    return configurations
