"""Project view operations."""

from typing import Any, NoReturn

import structlog

from hubgraph import queries
from hubgraph.mappers import map_view
from hubgraph.models import ProjectView
from hubgraph.pagination import Page, PageRequest, page
from hubgraph.services.base import ResourceService

logger = structlog.get_logger()

READ_ONLY_REASON = "project views can only be managed in the GitHub web interface"


class ViewService(ResourceService):
    """Read access to project views; views cannot be changed over GraphQL."""

    resource = "view"

    def list(self, project_id: str, page_size: int = 20, after: str | None = None) -> Page[ProjectView]:
        logger.info("Listing views", project_id=project_id, page_size=page_size)
        request = PageRequest(first=page_size, after=after)
        data = self._run(queries.PROJECT_VIEWS_QUERY, {"id": project_id, **request.variables()})
        project = self._require(data.get("node"), f"Project {project_id}")
        return page(project.get("views"), page_size, lambda node: map_view(node, project_id))

    def get(self, view_id: str) -> ProjectView:
        logger.info("Reading view", view_id=view_id)
        data = self._run(queries.VIEW_BY_ID_QUERY, {"id": view_id})
        return map_view(self._require(data.get("node"), f"View {view_id}"))

    def create(self, project_id: str, name: str, **attributes: Any) -> NoReturn:
        self._unsupported("View creation", READ_ONLY_REASON)

    def update(self, view_id: str, **changes: Any) -> NoReturn:
        self._unsupported("View update", READ_ONLY_REASON)

    def delete(self, view_id: str) -> NoReturn:
        self._unsupported("View deletion", READ_ONLY_REASON)

    def copy(self, view_id: str, name: str | None = None) -> NoReturn:
        self._unsupported("View copy", READ_ONLY_REASON)
