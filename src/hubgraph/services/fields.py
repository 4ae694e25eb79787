"""Project field and per-view field configuration operations."""

import builtins
from typing import Any, NoReturn

import structlog

from hubgraph import queries
from hubgraph.mappers import map_field, map_view_fields
from hubgraph.models import ProjectField, ViewFieldConfiguration
from hubgraph.pagination import Page, PageRequest, page
from hubgraph.services.base import ResourceService

logger = structlog.get_logger()

VIEW_LAYOUT_REASON = "view field layout, sorting and grouping are not exposed as mutations"


class FieldService(ResourceService):
    resource = "field"

    def list(self, project_id: str, page_size: int = 100, after: str | None = None) -> Page[ProjectField]:
        logger.info("Listing fields", project_id=project_id, page_size=page_size)
        request = PageRequest(first=page_size, after=after)
        data = self._run(queries.PROJECT_FIELDS_QUERY, {"id": project_id, **request.variables()})
        project = self._require(data.get("node"), f"Project {project_id}")
        return page(project.get("fields"), page_size, map_field)

    def list_view_fields(self, view_id: str) -> builtins.list[ViewFieldConfiguration]:
        """List every project field with its visibility in the given view.

        Width is not available remotely and is left unset.
        """
        logger.info("Listing view fields", view_id=view_id)
        data = self._run(queries.VIEW_FIELDS_QUERY, {"id": view_id})
        view = self._require(data.get("node"), f"View {view_id}")
        project = view.get("project") or {}
        project_fields = (project.get("fields") or {}).get("nodes") or []
        visible_fields = (view.get("fields") or {}).get("nodes") or []
        configurations = map_view_fields(view_id, project_fields, visible_fields)
        logger.info(
            "Listed view fields",
            view_id=view_id,
            count=len(configurations),
            visible=sum(1 for configuration in configurations if configuration.is_visible),
        )
        return configurations

    def add_view_field(self, view_id: str, field_id: str, **options: Any) -> NoReturn:
        self._unsupported("Adding a field to a view", VIEW_LAYOUT_REASON)

    def update_view_field(self, view_id: str, field_id: str, **changes: Any) -> NoReturn:
        self._unsupported("Updating a view field", VIEW_LAYOUT_REASON)

    def remove_view_field(self, view_id: str, field_id: str) -> NoReturn:
        self._unsupported("Removing a field from a view", VIEW_LAYOUT_REASON)

    def set_view_sort(self, view_id: str, field_id: str, direction: str = "ASC") -> NoReturn:
        self._unsupported("Sorting a view", VIEW_LAYOUT_REASON)

    def clear_view_sort(self, view_id: str) -> NoReturn:
        self._unsupported("Clearing a view sort", VIEW_LAYOUT_REASON)

    def set_view_group(self, view_id: str, field_id: str) -> NoReturn:
        self._unsupported("Grouping a view", VIEW_LAYOUT_REASON)

    def clear_view_group(self, view_id: str) -> NoReturn:
        self._unsupported("Clearing a view grouping", VIEW_LAYOUT_REASON)
