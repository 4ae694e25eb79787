"""Discussion comment and reply operations."""

from typing import Any

import structlog

from hubgraph import queries
from hubgraph.mappers import map_comment, map_discussion
from hubgraph.models import CommentNode, Discussion, DiscussionComment
from hubgraph.pagination import Page, PageRequest, check_page_size, page
from hubgraph.services.base import ResourceService
from hubgraph.threads import build_forest

logger = structlog.get_logger()

COMMENT_UPDATE_FIELDS = {"body": "body"}


def flatten_comments(nodes: list[dict[str, Any]]) -> list[DiscussionComment]:
    """Map top-level comment nodes and their nested replies into one flat list.

    Replies without a ``replyTo`` hang under the comment they were nested in.
    """
    comments = []
    for node in nodes:
        comment = map_comment(node)
        comments.append(comment)
        replies = node.get("replies") or {}
        for reply in replies.get("nodes") or []:
            if reply is None:
                continue
            comments.append(map_comment(reply, parent_id=comment.id))
    return comments


def reply_counts(nodes: list[dict[str, Any]]) -> dict[str, int]:
    """Server-side reply totals keyed by top-level comment ID."""
    counts = {}
    for node in nodes:
        total = (node.get("replies") or {}).get("totalCount")
        if node.get("id") and total is not None:
            counts[node["id"]] = total
    return counts


class CommentService(ResourceService):
    """Comments, threaded replies, upvotes and answers on a discussion."""

    resource = "comment"

    def list(
        self,
        discussion_id: str,
        page_size: int = 20,
        after: str | None = None,
        reply_page_size: int = 50,
    ) -> Page[CommentNode]:
        """List one page of top-level comments, each with its reply tree.

        Args:
            discussion_id: Global node ID of the discussion.
            page_size: Number of top-level comments to fetch.
            after: Cursor returned by the previous page.
            reply_page_size: Number of replies fetched per top-level comment.

        Returns:
            A page whose items are the root nodes of the reply forest.
        """
        logger.info("Listing comments", discussion_id=discussion_id, page_size=page_size)
        check_page_size(reply_page_size)

        request = PageRequest(first=page_size, after=after)
        data = self._run(
            queries.DISCUSSION_COMMENTS_QUERY,
            {"id": discussion_id, **request.variables(), "replyFirst": reply_page_size},
        )
        discussion = self._require(data.get("node"), f"Discussion {discussion_id}")
        raw = page(discussion.get("comments"), page_size)

        forest = build_forest(flatten_comments(raw.items))
        reply_totals = reply_counts(raw.items)
        for root in forest:
            root.total_reply_count = reply_totals.get(root.id)
        logger.info("Listed comments", discussion_id=discussion_id, threads=len(forest))
        return Page(
            items=forest,
            has_next_page=raw.has_next_page,
            end_cursor=raw.end_cursor,
            total_count=raw.total_count,
        )

    def create(self, discussion_id: str, body: str, reply_to_id: str | None = None) -> DiscussionComment:
        """Add a comment, or a reply when ``reply_to_id`` names a top-level comment."""
        logger.info("Creating comment", discussion_id=discussion_id, reply_to_id=reply_to_id)
        comment_input = {"discussionId": discussion_id, "body": body}
        if reply_to_id is not None:
            comment_input["replyToId"] = reply_to_id
        data = self._run(queries.ADD_COMMENT_MUTATION, {"input": comment_input})
        node = self._require((data.get("addDiscussionComment") or {}).get("comment"), "Comment")
        comment = map_comment(node, parent_id=reply_to_id)
        logger.info("Comment created", comment_id=comment.id)
        return comment

    def update(self, comment_id: str, **changes: str) -> DiscussionComment:
        logger.info("Updating comment", comment_id=comment_id, fields=sorted(changes))
        remote_input = self._partial_input("Comment update", changes, COMMENT_UPDATE_FIELDS)
        data = self._run(queries.UPDATE_COMMENT_MUTATION, {"input": {"commentId": comment_id, **remote_input}})
        node = self._require((data.get("updateDiscussionComment") or {}).get("comment"), f"Comment {comment_id}")
        return map_comment(node)

    def delete(self, comment_id: str) -> None:
        logger.info("Deleting comment", comment_id=comment_id)
        self._run(queries.DELETE_COMMENT_MUTATION, {"input": {"id": comment_id}})
        logger.info("Comment deleted", comment_id=comment_id)

    def upvote(self, comment_id: str) -> DiscussionComment:
        logger.info("Upvoting comment", comment_id=comment_id)
        data = self._run(queries.ADD_UPVOTE_MUTATION, {"input": {"subjectId": comment_id}})
        return map_comment(self._require((data.get("addUpvote") or {}).get("subject"), f"Comment {comment_id}"))

    def remove_upvote(self, comment_id: str) -> DiscussionComment:
        logger.info("Removing comment upvote", comment_id=comment_id)
        data = self._run(queries.REMOVE_UPVOTE_MUTATION, {"input": {"subjectId": comment_id}})
        return map_comment(self._require((data.get("removeUpvote") or {}).get("subject"), f"Comment {comment_id}"))

    def mark_as_answer(self, comment_id: str) -> Discussion:
        """Mark a comment as the answer; returns the updated discussion."""
        logger.info("Marking comment as answer", comment_id=comment_id)
        data = self._run(queries.MARK_ANSWER_MUTATION, {"input": {"id": comment_id}})
        node = (data.get("markDiscussionCommentAsAnswer") or {}).get("discussion")
        return map_discussion(self._require(node, f"Discussion for comment {comment_id}"))

    def unmark_as_answer(self, comment_id: str) -> Discussion:
        logger.info("Unmarking comment as answer", comment_id=comment_id)
        data = self._run(queries.UNMARK_ANSWER_MUTATION, {"input": {"id": comment_id}})
        node = (data.get("unmarkDiscussionCommentAsAnswer") or {}).get("discussion")
        return map_discussion(self._require(node, f"Discussion for comment {comment_id}"))
