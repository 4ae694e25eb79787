"""Discussion commands for the hubgraph CLI."""

from cyclopts import App

from hubgraph.models import OPEN, Discussion
from hubgraph.services import DiscussionService

discussion_app = App(name="discussion", help="Manage repository discussions")


def print_discussion(discussion: Discussion) -> None:
    print(f"Discussion: {discussion.id} (#{discussion.number})")
    print(f"Title: {discussion.title}")
    print(f"Status: {discussion.status}")
    if discussion.category:
        print(f"Category: {discussion.category.name} ({discussion.category.id})")
    if discussion.author:
        print(f"Author: {discussion.author.login}")
    print(f"Upvotes: {discussion.upvote_count}")
    print(f"Comments: {discussion.comments_total_count}")
    if discussion.labels:
        print(f"Labels: {', '.join(label.name for label in discussion.labels)}")
    if discussion.is_answered:
        print(f"Answered: {discussion.answer_chosen_at or 'yes'}")
    if discussion.url:
        print(f"URL: {discussion.url}")
    if discussion.body:
        print(f"\n{discussion.body}")


def _print_summary(discussion: Discussion) -> None:
    marker = "●" if discussion.status == OPEN else "○"
    category = f" [{discussion.category.name}]" if discussion.category else ""
    print(f"{marker} #{discussion.number} {discussion.id}: {discussion.title}{category}")


@discussion_app.command(name="list")
def list_discussions(
    owner: str,
    name: str,
    page_size: int = 20,
    after: str | None = None,
    category_id: str | None = None,
    order_by: str = "UPDATED_AT",
    direction: str = "DESC",
) -> None:
    """List discussions in a repository."""
    from hubgraph.cli import get_service, print_page

    service = get_service(DiscussionService)
    result = service.list(
        owner,
        name,
        page_size=page_size,
        after=after,
        category_id=category_id,
        order_by=order_by,
        direction=direction,
    )
    print_page(result, _print_summary, "discussion(s)")


@discussion_app.command
def get(discussion_id: str) -> None:
    """Show a discussion by node ID."""
    from hubgraph.cli import get_service

    print_discussion(get_service(DiscussionService).get(discussion_id))


@discussion_app.command
def show(owner: str, name: str, number: int) -> None:
    """Show a discussion by repository and number."""
    from hubgraph.cli import get_service

    print_discussion(get_service(DiscussionService).get_by_number(owner, name, number))


@discussion_app.command
def create(owner: str, name: str, title: str, category_id: str, body: str = "") -> None:
    """Create a discussion in a repository category."""
    from hubgraph.cli import get_service

    service = get_service(DiscussionService)
    repository_id = service.get_repository_id(owner, name)
    discussion = service.create(repository_id, title, body, category_id)
    print(f"Created discussion #{discussion.number} {discussion.id}: {discussion.title}")


@discussion_app.command
def update(
    discussion_id: str,
    title: str | None = None,
    body: str | None = None,
    category_id: str | None = None,
) -> None:
    """Update the title, body or category of a discussion."""
    from hubgraph.cli import collect_changes, get_service

    changes = collect_changes(title=title, body=body, category_id=category_id)
    discussion = get_service(DiscussionService).update(discussion_id, **changes)
    print(f"Updated discussion {discussion.id}: {discussion.title}")


@discussion_app.command
def delete(*discussion_ids: str) -> None:
    """Delete one or more discussions."""
    from hubgraph.cli import get_service

    service = get_service(DiscussionService)
    for discussion_id in discussion_ids:
        service.delete(discussion_id)
    print(f"Deleted {len(discussion_ids)} discussion(s)")


@discussion_app.command
def lock(discussion_id: str, reason: str | None = None) -> None:
    """Lock a discussion (reason: OFF_TOPIC, RESOLVED, SPAM or TOO_HEATED)."""
    from hubgraph.cli import get_service

    discussion = get_service(DiscussionService).lock(discussion_id, reason=reason)
    print(f"Discussion {discussion.id} is {discussion.status}")


@discussion_app.command
def unlock(discussion_id: str) -> None:
    """Unlock a discussion."""
    from hubgraph.cli import get_service

    discussion = get_service(DiscussionService).unlock(discussion_id)
    print(f"Discussion {discussion.id} is {discussion.status}")


@discussion_app.command
def upvote(discussion_id: str, remove: bool = False) -> None:
    """Upvote a discussion, or withdraw the upvote with --remove."""
    from hubgraph.cli import get_service

    service = get_service(DiscussionService)
    discussion = service.remove_upvote(discussion_id) if remove else service.upvote(discussion_id)
    print(f"Discussion {discussion.id} has {discussion.upvote_count} upvote(s)")
