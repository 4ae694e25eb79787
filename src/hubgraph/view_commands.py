"""Project view commands for the hubgraph CLI."""

from cyclopts import App

from hubgraph.models import ProjectView
from hubgraph.services import ViewService

view_app = App(name="view", help="Inspect project views")


def _print_view(view: ProjectView) -> None:
    layout = f" [{view.layout}]" if view.layout else ""
    print(f"#{view.number} {view.id}: {view.name}{layout}")


@view_app.command(name="list")
def list_views(project_id: str, page_size: int = 20, after: str | None = None) -> None:
    """List the views of a project."""
    from hubgraph.cli import get_service, print_page

    result = get_service(ViewService).list(project_id, page_size=page_size, after=after)
    print_page(result, _print_view, "view(s)")


@view_app.command
def get(view_id: str) -> None:
    """Show a project view."""
    from hubgraph.cli import get_service

    view = get_service(ViewService).get(view_id)
    print(f"View: {view.id} (#{view.number})")
    print(f"Name: {view.name}")
    if view.layout:
        print(f"Layout: {view.layout}")
    if view.filter:
        print(f"Filter: {view.filter}")
    if view.project_id:
        print(f"Project: {view.project_id}")
