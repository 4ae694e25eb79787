"""Comment commands for the hubgraph CLI."""

from cyclopts import App

from hubgraph.models import CommentNode
from hubgraph.services import CommentService

comment_app = App(name="comment", help="Manage discussion comments and replies")


def print_thread(node: CommentNode, depth: int = 0) -> None:
    """Print a comment and its replies, indenting one level per reply depth."""
    comment = node.comment
    indent = "  " * depth
    author = comment.author.login if comment.author else "ghost"
    answer = " [answer]" if comment.is_answer else ""
    first_line = comment.body.splitlines()[0] if comment.body else ""
    print(f"{indent}- {comment.id} by {author} (+{comment.upvote_count}){answer}: {first_line}")
    for reply in node.replies:
        print_thread(reply, depth + 1)
    if node.has_more_replies:
        shown = len(node.walk()) - 1
        print(f"{indent}  ... {node.total_reply_count - shown} more repl(ies), raise --reply-page-size to see them")


@comment_app.command(name="list")
def list_comments(
    discussion_id: str,
    page_size: int = 20,
    after: str | None = None,
    reply_page_size: int = 50,
) -> None:
    """List comments of a discussion as reply threads."""
    from hubgraph.cli import get_service, print_page

    result = get_service(CommentService).list(
        discussion_id,
        page_size=page_size,
        after=after,
        reply_page_size=reply_page_size,
    )
    print_page(result, print_thread, "thread(s)")


@comment_app.command
def add(discussion_id: str, body: str, reply_to: str | None = None) -> None:
    """Add a comment, or a reply to an existing comment with --reply-to."""
    from hubgraph.cli import get_service

    comment = get_service(CommentService).create(discussion_id, body, reply_to_id=reply_to)
    kind = "reply" if comment.parent_id else "comment"
    print(f"Created {kind} {comment.id}")


@comment_app.command
def update(comment_id: str, body: str) -> None:
    """Replace the body of a comment."""
    from hubgraph.cli import get_service

    comment = get_service(CommentService).update(comment_id, body=body)
    print(f"Updated comment {comment.id}")


@comment_app.command
def delete(*comment_ids: str) -> None:
    """Delete one or more comments."""
    from hubgraph.cli import get_service

    service = get_service(CommentService)
    for comment_id in comment_ids:
        service.delete(comment_id)
    print(f"Deleted {len(comment_ids)} comment(s)")


@comment_app.command
def upvote(comment_id: str, remove: bool = False) -> None:
    """Upvote a comment, or withdraw the upvote with --remove."""
    from hubgraph.cli import get_service

    service = get_service(CommentService)
    comment = service.remove_upvote(comment_id) if remove else service.upvote(comment_id)
    print(f"Comment {comment.id} has {comment.upvote_count} upvote(s)")


@comment_app.command
def answer(comment_id: str, unmark: bool = False) -> None:
    """Mark a comment as the discussion's answer, or clear it with --unmark."""
    from hubgraph.cli import get_service

    service = get_service(CommentService)
    discussion = service.unmark_as_answer(comment_id) if unmark else service.mark_as_answer(comment_id)
    state = "answered" if discussion.is_answered else "unanswered"
    print(f"Discussion {discussion.id} is {state}")
