"""Discussion category operations.

Categories are read-only: the GitHub schema exposes no mutation that
creates, renames or removes a discussion category.
"""

from typing import Any, NoReturn

import structlog

from hubgraph import queries
from hubgraph.mappers import map_category
from hubgraph.models import DiscussionCategory
from hubgraph.pagination import Page, PageRequest, page
from hubgraph.services.base import ResourceService

logger = structlog.get_logger()

READ_ONLY_REASON = "discussion categories can only be managed in the repository settings"


class CategoryService(ResourceService):
    resource = "category"

    def list(self, owner: str, name: str, page_size: int = 100, after: str | None = None) -> Page[DiscussionCategory]:
        """List one page of a repository's discussion categories."""
        logger.info("Listing categories", owner=owner, name=name)
        request = PageRequest(first=page_size, after=after)
        data = self._run(queries.CATEGORIES_QUERY, {"owner": owner, "name": name, **request.variables()})
        repository = self._require(data.get("repository"), f"Repository {owner}/{name}")
        result = page(repository.get("discussionCategories"), page_size, map_category)
        logger.info("Listed categories", owner=owner, name=name, count=len(result.items))
        return result

    def get(self, category_id: str) -> DiscussionCategory:
        logger.info("Reading category", category_id=category_id)
        data = self._run(queries.CATEGORY_BY_ID_QUERY, {"id": category_id})
        return map_category(self._require(data.get("node"), f"Category {category_id}"))

    def create(self, repository_id: str, name: str, **attributes: Any) -> NoReturn:
        self._unsupported("Category creation", READ_ONLY_REASON)

    def update(self, category_id: str, **changes: Any) -> NoReturn:
        self._unsupported("Category update", READ_ONLY_REASON)

    def delete(self, category_id: str) -> NoReturn:
        self._unsupported("Category deletion", READ_ONLY_REASON)
