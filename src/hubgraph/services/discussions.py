"""Discussion operations."""

import structlog

from hubgraph import queries
from hubgraph.errors import ValidationError
from hubgraph.mappers import map_discussion
from hubgraph.models import Discussion
from hubgraph.pagination import Page, PageRequest, page
from hubgraph.services.base import ResourceService

logger = structlog.get_logger()

ORDER_FIELDS = ("CREATED_AT", "UPDATED_AT")
ORDER_DIRECTIONS = ("ASC", "DESC")
LOCK_REASONS = ("OFF_TOPIC", "RESOLVED", "SPAM", "TOO_HEATED")

DISCUSSION_UPDATE_FIELDS = {
    "title": "title",
    "body": "body",
    "category_id": "categoryId",
}


class DiscussionService(ResourceService):
    """CRUD, locking and upvoting for repository discussions."""

    resource = "discussion"

    def list(
        self,
        owner: str,
        name: str,
        page_size: int = 20,
        after: str | None = None,
        category_id: str | None = None,
        order_by: str = "UPDATED_AT",
        direction: str = "DESC",
    ) -> Page[Discussion]:
        """List one page of a repository's discussions."""
        logger.info("Listing discussions", owner=owner, name=name, page_size=page_size, category_id=category_id)

        order_by, direction = order_by.upper(), direction.upper()
        if order_by not in ORDER_FIELDS:
            raise ValidationError(f"Unsupported order field: '{order_by}'. Use one of {', '.join(ORDER_FIELDS)}")
        if direction not in ORDER_DIRECTIONS:
            raise ValidationError(f"Unsupported direction: '{direction}'. Use ASC or DESC")

        request = PageRequest(first=page_size, after=after)
        data = self._run(
            queries.DISCUSSIONS_QUERY,
            {
                "owner": owner,
                "name": name,
                **request.variables(),
                "categoryId": category_id,
                "orderBy": {"field": order_by, "direction": direction},
            },
        )
        repository = self._require(data.get("repository"), f"Repository {owner}/{name}")
        result = page(repository.get("discussions"), page_size, map_discussion)
        logger.info("Listed discussions", owner=owner, name=name, count=len(result.items))
        return result

    def get(self, discussion_id: str) -> Discussion:
        """Read a discussion by its global node ID."""
        logger.info("Reading discussion", discussion_id=discussion_id)
        data = self._run(queries.DISCUSSION_BY_ID_QUERY, {"id": discussion_id})
        return map_discussion(self._require(data.get("node"), f"Discussion {discussion_id}"))

    def get_by_number(self, owner: str, name: str, number: int) -> Discussion:
        """Read a discussion by repository and discussion number."""
        logger.info("Reading discussion by number", owner=owner, name=name, number=number)
        data = self._run(queries.DISCUSSION_BY_NUMBER_QUERY, {"owner": owner, "name": name, "number": number})
        repository = self._require(data.get("repository"), f"Repository {owner}/{name}")
        return map_discussion(self._require(repository.get("discussion"), f"Discussion {owner}/{name}#{number}"))

    def get_repository_id(self, owner: str, name: str) -> str:
        """Resolve the node ID that discussion creation needs."""
        data = self._run(queries.REPOSITORY_ID_QUERY, {"owner": owner, "name": name})
        return self._require(data.get("repository"), f"Repository {owner}/{name}")["id"]

    def create(self, repository_id: str, title: str, body: str, category_id: str) -> Discussion:
        """Create a discussion in a repository category."""
        logger.info("Creating discussion", repository_id=repository_id, title=title, category_id=category_id)
        data = self._run(
            queries.CREATE_DISCUSSION_MUTATION,
            {"input": {"repositoryId": repository_id, "title": title, "body": body, "categoryId": category_id}},
        )
        discussion = map_discussion(self._require((data.get("createDiscussion") or {}).get("discussion"), "Discussion"))
        logger.info("Discussion created", discussion_id=discussion.id, number=discussion.number)
        return discussion

    def update(self, discussion_id: str, **changes: str) -> Discussion:
        """Apply a partial update; only title, body and category_id may change."""
        logger.info("Updating discussion", discussion_id=discussion_id, fields=sorted(changes))
        remote_input = self._partial_input("Discussion update", changes, DISCUSSION_UPDATE_FIELDS)
        data = self._run(
            queries.UPDATE_DISCUSSION_MUTATION,
            {"input": {"discussionId": discussion_id, **remote_input}},
        )
        discussion = map_discussion(
            self._require((data.get("updateDiscussion") or {}).get("discussion"), f"Discussion {discussion_id}")
        )
        logger.info("Discussion updated", discussion_id=discussion_id)
        return discussion

    def delete(self, discussion_id: str) -> None:
        logger.info("Deleting discussion", discussion_id=discussion_id)
        self._run(queries.DELETE_DISCUSSION_MUTATION, {"input": {"id": discussion_id}})
        logger.info("Discussion deleted", discussion_id=discussion_id)

    def lock(self, discussion_id: str, reason: str | None = None) -> Discussion:
        """Lock a discussion, optionally recording why."""
        logger.info("Locking discussion", discussion_id=discussion_id, reason=reason)
        lock_input = {"lockableId": discussion_id}
        if reason is not None:
            reason = reason.upper()
            if reason not in LOCK_REASONS:
                raise ValidationError(f"Unsupported lock reason: '{reason}'. Use one of {', '.join(LOCK_REASONS)}")
            lock_input["lockReason"] = reason
        data = self._run(queries.LOCK_MUTATION, {"input": lock_input})
        record = (data.get("lockLockable") or {}).get("lockedRecord")
        return map_discussion(self._require(record, f"Discussion {discussion_id}"))

    def unlock(self, discussion_id: str) -> Discussion:
        logger.info("Unlocking discussion", discussion_id=discussion_id)
        data = self._run(queries.UNLOCK_MUTATION, {"input": {"lockableId": discussion_id}})
        record = (data.get("unlockLockable") or {}).get("unlockedRecord")
        return map_discussion(self._require(record, f"Discussion {discussion_id}"))

    def upvote(self, discussion_id: str) -> Discussion:
        logger.info("Upvoting discussion", discussion_id=discussion_id)
        data = self._run(queries.ADD_UPVOTE_MUTATION, {"input": {"subjectId": discussion_id}})
        subject = (data.get("addUpvote") or {}).get("subject")
        return map_discussion(self._require(subject, f"Discussion {discussion_id}"))

    def remove_upvote(self, discussion_id: str) -> Discussion:
        logger.info("Removing discussion upvote", discussion_id=discussion_id)
        data = self._run(queries.REMOVE_UPVOTE_MUTATION, {"input": {"subjectId": discussion_id}})
        subject = (data.get("removeUpvote") or {}).get("subject")
        return map_discussion(self._require(subject, f"Discussion {discussion_id}"))
