"""Project field commands for the hubgraph CLI."""

from cyclopts import App

from hubgraph.models import ProjectField
from hubgraph.services import FieldService

field_app = App(name="field", help="Inspect project fields and their visibility in views")


def _print_field(project_field: ProjectField) -> None:
    built_in = " (built-in)" if project_field.is_built_in else ""
    print(f"{project_field.id}: {project_field.name} [{project_field.data_type}]{built_in}")
    for option in project_field.options:
        print(f"    - {option.id}: {option.name}")


@field_app.command(name="list")
def list_fields(project_id: str, page_size: int = 100, after: str | None = None) -> None:
    """List the fields of a project."""
    from hubgraph.cli import get_service, print_page

    result = get_service(FieldService).list(project_id, page_size=page_size, after=after)
    print_page(result, _print_field, "field(s)")


@field_app.command(name="view")
def view_fields(view_id: str) -> None:
    """Show which project fields a view displays."""
    from hubgraph.cli import get_service

    configurations = get_service(FieldService).list_view_fields(view_id)
    if not configurations:
        print(f"No fields found for view {view_id}")
        return

    print(f"Fields for view {view_id}:\n")
    for configuration in configurations:
        marker = "●" if configuration.is_visible else "○"
        print(f"{marker} {configuration.field_id}: {configuration.field_name} [{configuration.data_type}]")
