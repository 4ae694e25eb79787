"""Project (ProjectV2) and project item operations."""

from typing import Any

import structlog

from hubgraph import queries
from hubgraph.errors import ValidationError
from hubgraph.mappers import map_owner, map_project, map_project_item, map_viewer
from hubgraph.models import Project, ProjectItem, ProjectOwner, Viewer
from hubgraph.pagination import Page, PageRequest, page
from hubgraph.services.base import ResourceService

logger = structlog.get_logger()

OWNER_TYPES = ("organization", "user")

PROJECT_UPDATE_FIELDS = {
    "title": "title",
    "short_description": "shortDescription",
    "readme": "readme",
    "public": "public",
    "closed": "closed",
}

ITEM_VALUE_FIELDS = {
    "text": "text",
    "number": "number",
    "date": "date",
    "single_select_option_id": "singleSelectOptionId",
    "iteration_id": "iterationId",
}


def _owner_queries(owner_type: str) -> tuple[str, str]:
    owner_type = owner_type.lower()
    if owner_type == "organization":
        return queries.ORGANIZATION_PROJECTS_QUERY, queries.ORGANIZATION_PROJECT_BY_NUMBER_QUERY
    if owner_type == "user":
        return queries.USER_PROJECTS_QUERY, queries.USER_PROJECT_BY_NUMBER_QUERY
    raise ValidationError(f"Unknown owner type: '{owner_type}'. Use one of {', '.join(OWNER_TYPES)}")


class ProjectService(ResourceService):
    """Projects owned by users or organizations, plus their items."""

    resource = "project"

    def list_viewer(self, page_size: int = 20, after: str | None = None) -> Page[Project]:
        """List projects owned by the authenticated user."""
        logger.info("Listing viewer projects", page_size=page_size)
        request = PageRequest(first=page_size, after=after)
        data = self._run(queries.VIEWER_PROJECTS_QUERY, request.variables())
        viewer = self._require(data.get("viewer"), "Viewer")
        return page(viewer.get("projectsV2"), page_size, map_project)

    def list_for_owner(
        self,
        login: str,
        owner_type: str = "organization",
        page_size: int = 20,
        after: str | None = None,
    ) -> Page[Project]:
        """List projects owned by an organization or a user.

        Args:
            login: Login of the owning account.
            owner_type: Either ``organization`` or ``user``.
            page_size: Number of projects to fetch.
            after: Cursor returned by the previous page.

        Returns:
            One page of projects.
        """
        logger.info("Listing projects", login=login, owner_type=owner_type, page_size=page_size)
        list_query, _ = _owner_queries(owner_type)
        request = PageRequest(first=page_size, after=after)
        data = self._run(list_query, {"login": login, **request.variables()})
        owner = self._require(data.get("owner"), f"Owner {login}")
        result = page(owner.get("projectsV2"), page_size, map_project)
        logger.info("Listed projects", login=login, count=len(result.items))
        return result

    def get(self, project_id: str) -> Project:
        logger.info("Reading project", project_id=project_id)
        data = self._run(queries.PROJECT_BY_ID_QUERY, {"id": project_id})
        return map_project(self._require(data.get("node"), f"Project {project_id}"))

    def get_by_number(self, login: str, number: int, owner_type: str = "organization") -> Project:
        logger.info("Reading project by number", login=login, number=number, owner_type=owner_type)
        _, number_query = _owner_queries(owner_type)
        data = self._run(number_query, {"login": login, "number": number})
        owner = self._require(data.get("owner"), f"Owner {login}")
        return map_project(self._require(owner.get("projectV2"), f"Project {login}#{number}"))

    def get_owner(self, login: str) -> ProjectOwner:
        """Resolve a user or organization login to the owner ID creation needs."""
        data = self._run(queries.OWNER_QUERY, {"login": login})
        return map_owner(self._require(data.get("repositoryOwner"), f"Owner {login}"))

    def get_viewer(self) -> Viewer:
        data = self._run(queries.VIEWER_QUERY)
        return map_viewer(self._require(data.get("viewer"), "Viewer"))

    def create(
        self,
        owner_id: str,
        title: str,
        description: str | None = None,
        repository_id: str | None = None,
    ) -> Project:
        """Create a project, optionally linked to a repository.

        A description cannot be set at creation time; use ``update`` with
        ``short_description`` afterwards.
        """
        if description is not None:
            self._unsupported(
                "Project creation with a description",
                "createProjectV2 takes no description, set short_description with an update instead",
            )
        logger.info("Creating project", owner_id=owner_id, title=title, repository_id=repository_id)
        project_input = {"ownerId": owner_id, "title": title}
        if repository_id is not None:
            project_input["repositoryId"] = repository_id
        data = self._run(queries.CREATE_PROJECT_MUTATION, {"input": project_input})
        project = map_project(self._require((data.get("createProjectV2") or {}).get("projectV2"), "Project"))
        logger.info("Project created", project_id=project.id, number=project.number)
        return project

    def update(self, project_id: str, **changes: Any) -> Project:
        """Apply a partial update to title, short_description, readme, public or closed."""
        logger.info("Updating project", project_id=project_id, fields=sorted(changes))
        remote_input = self._partial_input("Project update", changes, PROJECT_UPDATE_FIELDS)
        data = self._run(queries.UPDATE_PROJECT_MUTATION, {"input": {"projectId": project_id, **remote_input}})
        node = (data.get("updateProjectV2") or {}).get("projectV2")
        return map_project(self._require(node, f"Project {project_id}"))

    def delete(self, project_id: str) -> None:
        logger.info("Deleting project", project_id=project_id)
        self._run(queries.DELETE_PROJECT_MUTATION, {"input": {"projectId": project_id}})
        logger.info("Project deleted", project_id=project_id)

    def list_items(self, project_id: str, page_size: int = 20, after: str | None = None) -> Page[ProjectItem]:
        logger.info("Listing project items", project_id=project_id, page_size=page_size)
        request = PageRequest(first=page_size, after=after)
        data = self._run(queries.PROJECT_ITEMS_QUERY, {"id": project_id, **request.variables()})
        project = self._require(data.get("node"), f"Project {project_id}")
        return page(project.get("items"), page_size, lambda node: map_project_item(node, project_id))

    def add_item(self, project_id: str, content_id: str) -> ProjectItem:
        """Add an existing issue or pull request to a project."""
        logger.info("Adding project item", project_id=project_id, content_id=content_id)
        data = self._run(
            queries.ADD_PROJECT_ITEM_MUTATION,
            {"input": {"projectId": project_id, "contentId": content_id}},
        )
        node = (data.get("addProjectV2ItemById") or {}).get("item")
        return map_project_item(self._require(node, "Project item"), project_id)

    def delete_item(self, project_id: str, item_id: str) -> None:
        logger.info("Deleting project item", project_id=project_id, item_id=item_id)
        self._run(queries.DELETE_PROJECT_ITEM_MUTATION, {"input": {"projectId": project_id, "itemId": item_id}})

    def set_item_field_value(self, project_id: str, item_id: str, field_id: str, **value: Any) -> ProjectItem:
        """Set one field of a project item.

        Exactly one of ``text``, ``number``, ``date``,
        ``single_select_option_id`` or ``iteration_id`` must be given.
        """
        logger.info("Setting project item field", project_id=project_id, item_id=item_id, field_id=field_id)
        remote_value = self._partial_input("Project item field update", value, ITEM_VALUE_FIELDS)
        if len(remote_value) != 1:
            raise ValidationError(f"Exactly one field value is required, got {', '.join(sorted(value))}")
        data = self._run(
            queries.UPDATE_ITEM_FIELD_VALUE_MUTATION,
            {"input": {"projectId": project_id, "itemId": item_id, "fieldId": field_id, "value": remote_value}},
        )
        node = (data.get("updateProjectV2ItemFieldValue") or {}).get("projectV2Item")
        return map_project_item(self._require(node, f"Project item {item_id}"), project_id)
