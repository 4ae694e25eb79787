"""Domain entities mapped from GitHub GraphQL nodes."""

from dataclasses import dataclass, field
from datetime import datetime

OPEN = "OPEN"
LOCKED = "LOCKED"
CLOSED = "CLOSED"

BUILT_IN_FIELDS = frozenset({"title", "assignees", "status", "labels", "milestone", "repository"})


def lockable_status(locked: bool) -> str:
    """Lifecycle status of a lockable resource."""
    return LOCKED if locked else OPEN


def closable_status(closed: bool) -> str:
    """Lifecycle status of a closable resource."""
    return CLOSED if closed else OPEN


def content_type_of(typename: str | None, url: str | None = None) -> str | None:
    """Kind of content attached to a project item."""
    if typename:
        return typename
    if not url:
        return None
    if "/pull/" in url:
        return "PullRequest"
    if "/issues/" in url:
        return "Issue"
    return "DraftIssue"


def is_built_in_field(name: str) -> bool:
    return name.lower() in BUILT_IN_FIELDS


@dataclass(frozen=True)
class Author:
    login: str
    id: str | None = None
    avatar_url: str | None = None
    url: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class Label:
    id: str
    name: str
    color: str | None = None
    description: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class DiscussionCategory:
    id: str
    name: str
    slug: str | None = None
    description: str | None = None
    emoji: str | None = None
    emoji_html: str | None = None
    is_answerable: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class DiscussionComment:
    """A discussion comment or reply; ``parent_id`` is set for replies."""

    id: str
    body: str = ""
    body_html: str | None = None
    url: str | None = None
    author: Author | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    upvote_count: int = 0
    viewer_has_upvoted: bool = False
    is_answer: bool = False
    is_minimized: bool = False
    minimized_reason: str | None = None
    parent_id: str | None = None


@dataclass(frozen=True)
class Discussion:
    """A repository discussion.

    ``status`` is derived from ``locked`` on every access; the remote schema
    has no such field.
    """

    id: str
    number: int
    title: str
    body: str = ""
    url: str | None = None
    locked: bool = False
    category: DiscussionCategory | None = None
    author: Author | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    upvote_count: int = 0
    viewer_has_upvoted: bool = False
    comments_total_count: int = 0
    labels: tuple[Label, ...] = ()
    answer: DiscussionComment | None = None
    answer_chosen_at: datetime | None = None

    @property
    def status(self) -> str:
        return lockable_status(self.locked)

    @property
    def category_id(self) -> str | None:
        return self.category.id if self.category else None

    @property
    def is_answered(self) -> bool:
        return self.answer_chosen_at is not None


@dataclass
class CommentNode:
    """One comment in a reply forest, owning its direct replies in order."""

    comment: DiscussionComment
    replies: list["CommentNode"] = field(default_factory=list)
    total_reply_count: int | None = None

    @property
    def id(self) -> str:
        return self.comment.id

    @property
    def has_more_replies(self) -> bool:
        """True when the server holds more replies than this subtree carries."""
        if self.total_reply_count is None:
            return False
        return self.total_reply_count > len(self.walk()) - 1

    def walk(self) -> list["CommentNode"]:
        """All nodes of this subtree in depth-first order, iteratively."""
        result: list[CommentNode] = []
        stack: list[CommentNode] = [self]
        while stack:
            node = stack.pop()
            result.append(node)
            stack.extend(reversed(node.replies))
        return result


@dataclass(frozen=True)
class ProjectOwner:
    id: str
    login: str
    type: str | None = None


@dataclass(frozen=True)
class Viewer:
    login: str
    id: str | None = None
    project_count: int = 0


@dataclass(frozen=True)
class Project:
    """A Projects (v2) board; ``status`` is derived from ``closed``."""

    id: str
    number: int
    title: str
    url: str | None = None
    closed: bool = False
    short_description: str | None = None
    readme: str | None = None
    public: bool | None = None
    owner: ProjectOwner | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def status(self) -> str:
        return closable_status(self.closed)


@dataclass(frozen=True)
class ProjectItem:
    id: str
    project_id: str | None = None
    content_id: str | None = None
    content_typename: str | None = None
    title: str | None = None
    body: str | None = None
    state: str | None = None
    url: str | None = None
    is_archived: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def content_type(self) -> str | None:
        return content_type_of(self.content_typename, self.url)


@dataclass(frozen=True)
class ProjectFieldOption:
    id: str
    name: str
    color: str | None = None


@dataclass(frozen=True)
class ProjectField:
    id: str
    name: str
    data_type: str
    options: tuple[ProjectFieldOption, ...] = ()

    @property
    def is_built_in(self) -> bool:
        return is_built_in_field(self.name)


@dataclass(frozen=True)
class ProjectView:
    id: str
    number: int
    name: str
    layout: str | None = None
    filter: str | None = None
    project_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ViewFieldConfiguration:
    """A (view, field) pair as seen by one project view.

    ``width`` is caller-managed; GitHub does not expose column widths, so it
    is ``None`` unless the caller supplies one.
    """

    view_id: str
    field_id: str
    field_name: str
    data_type: str
    is_visible: bool
    width: int | None = None

    @property
    def is_built_in(self) -> bool:
        return is_built_in_field(self.field_name)
