"""Project commands for the hubgraph CLI."""

from typing import Literal

from cyclopts import App

from hubgraph.models import OPEN, Project, ProjectItem
from hubgraph.services import ProjectService

project_app = App(name="project", help="Manage projects and project items")


def print_project(project: Project) -> None:
    print(f"Project: {project.id} (#{project.number})")
    print(f"Title: {project.title}")
    print(f"Status: {project.status}")
    if project.owner:
        print(f"Owner: {project.owner.login}")
    if project.public is not None:
        print(f"Visibility: {'public' if project.public else 'private'}")
    if project.short_description:
        print(f"Description: {project.short_description}")
    if project.url:
        print(f"URL: {project.url}")


def _print_summary(project: Project) -> None:
    marker = "●" if project.status == OPEN else "○"
    print(f"{marker} #{project.number} {project.id}: {project.title}")


def _print_item(item: ProjectItem) -> None:
    content_type = item.content_type or "Unknown"
    archived = " (archived)" if item.is_archived else ""
    print(f"{item.id} [{content_type}]: {item.title or ''}{archived}")


@project_app.command(name="list")
def list_projects(
    owner: str | None = None,
    owner_type: Literal["organization", "user"] = "organization",
    page_size: int = 20,
    after: str | None = None,
) -> None:
    """List projects of an owner, or of the authenticated user when no owner is given."""
    from hubgraph.cli import get_service, print_page

    service = get_service(ProjectService)
    if owner is None:
        result = service.list_viewer(page_size=page_size, after=after)
    else:
        result = service.list_for_owner(owner, owner_type, page_size=page_size, after=after)
    print_page(result, _print_summary, "project(s)")


@project_app.command
def get(project_id: str) -> None:
    """Show a project by node ID."""
    from hubgraph.cli import get_service

    print_project(get_service(ProjectService).get(project_id))


@project_app.command
def show(owner: str, number: int, owner_type: Literal["organization", "user"] = "organization") -> None:
    """Show a project by owner login and number."""
    from hubgraph.cli import get_service

    print_project(get_service(ProjectService).get_by_number(owner, number, owner_type))


@project_app.command
def viewer() -> None:
    """Show the authenticated user."""
    from hubgraph.cli import get_service

    user = get_service(ProjectService).get_viewer()
    print(f"Logged in as {user.login} ({user.project_count} project(s))")


@project_app.command
def create(owner: str, title: str, repository_id: str | None = None) -> None:
    """Create a project for a user or organization login."""
    from hubgraph.cli import get_service

    service = get_service(ProjectService)
    project_owner = service.get_owner(owner)
    project = service.create(project_owner.id, title, repository_id=repository_id)
    print(f"Created project #{project.number} {project.id}: {project.title}")


@project_app.command
def update(
    project_id: str,
    title: str | None = None,
    short_description: str | None = None,
    readme: str | None = None,
    public: bool | None = None,
    closed: bool | None = None,
) -> None:
    """Update a project's title, description, readme, visibility or closed flag."""
    from hubgraph.cli import collect_changes, get_service

    changes = collect_changes(
        title=title,
        short_description=short_description,
        readme=readme,
        public=public,
        closed=closed,
    )
    project = get_service(ProjectService).update(project_id, **changes)
    print(f"Updated project {project.id}: {project.title} ({project.status})")


@project_app.command
def delete(*project_ids: str) -> None:
    """Delete one or more projects."""
    from hubgraph.cli import get_service

    service = get_service(ProjectService)
    for project_id in project_ids:
        service.delete(project_id)
    print(f"Deleted {len(project_ids)} project(s)")


@project_app.command
def items(project_id: str, page_size: int = 20, after: str | None = None) -> None:
    """List the items of a project."""
    from hubgraph.cli import get_service, print_page

    result = get_service(ProjectService).list_items(project_id, page_size=page_size, after=after)
    print_page(result, _print_item, "item(s)")


@project_app.command
def add_item(project_id: str, content_id: str) -> None:
    """Add an issue or pull request to a project."""
    from hubgraph.cli import get_service

    item = get_service(ProjectService).add_item(project_id, content_id)
    print(f"Added item {item.id} to project {project_id}")


@project_app.command
def remove_item(project_id: str, *item_ids: str) -> None:
    """Remove one or more items from a project."""
    from hubgraph.cli import get_service

    service = get_service(ProjectService)
    for item_id in item_ids:
        service.delete_item(project_id, item_id)
    print(f"Removed {len(item_ids)} item(s) from project {project_id}")


@project_app.command
def set_field(
    project_id: str,
    item_id: str,
    field_id: str,
    text: str | None = None,
    number: float | None = None,
    date: str | None = None,
    option_id: str | None = None,
    iteration_id: str | None = None,
) -> None:
    """Set one field value on a project item."""
    from hubgraph.cli import collect_changes, get_service

    value = collect_changes(
        text=text,
        number=number,
        date=date,
        single_select_option_id=option_id,
        iteration_id=iteration_id,
    )
    item = get_service(ProjectService).set_item_field_value(project_id, item_id, field_id, **value)
    print(f"Updated field {field_id} on item {item.id}")
