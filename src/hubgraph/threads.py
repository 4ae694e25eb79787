"""Assembly of threaded reply trees from flat comment lists."""

from collections.abc import Iterable

import structlog

from hubgraph.models import CommentNode, DiscussionComment

logger = structlog.get_logger()


def _resolve_parents(comments: list[DiscussionComment], index: dict[str, CommentNode]) -> dict[str, str | None]:
    """Map each comment ID to the parent it will hang under.

    Parents missing from the input are dropped (the comment becomes a root).
    Walking each parent chain, the comment at which a chain closes on itself
    loses its parent, which breaks every cycle exactly once.
    """
    parents: dict[str, str | None] = {}
    for comment in comments:
        if comment.id in parents:
            continue
        parent_id = comment.parent_id
        if parent_id is not None and parent_id not in index:
            logger.debug("Reply parent not in result set, treating as root", comment_id=comment.id, parent_id=parent_id)
            parent_id = None
        parents[comment.id] = parent_id

    for comment in comments:
        seen = {comment.id}
        current = parents[comment.id]
        while current is not None:
            if current in seen:
                logger.warning(
                    "data-integrity anomaly: reply cycle detected, treating comment as root",
                    comment_id=current,
                    start_id=comment.id,
                )
                parents[current] = None
                break
            seen.add(current)
            current = parents[current]
    return parents


def build_forest(comments: Iterable[DiscussionComment]) -> list[CommentNode]:
    """Arrange comments into root comments with nested replies.

    Every input comment appears exactly once in the result, and siblings keep
    their relative input order.
    """
    comments = list(comments)
    nodes = [CommentNode(comment=comment) for comment in comments]

    index: dict[str, CommentNode] = {}
    for node in nodes:
        if node.id in index:
            logger.warning("data-integrity anomaly: duplicate comment id", comment_id=node.id)
            continue
        index[node.id] = node

    parents = _resolve_parents(comments, index)

    roots: list[CommentNode] = []
    for node in nodes:
        parent_id = parents[node.id]
        if parent_id is None:
            roots.append(node)
        else:
            index[parent_id].replies.append(node)

    logger.debug("Built reply forest", comments=len(nodes), roots=len(roots))
    return roots


def count_nodes(forest: Iterable[CommentNode]) -> int:
    """Total number of comments in a forest, replies included."""
    return sum(len(root.walk()) for root in forest)
