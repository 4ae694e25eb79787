"""CLI for hubgraph."""

import sys
from collections.abc import Callable
from typing import Annotated, Any, Literal, TypeVar

import structlog
from cyclopts import App, Parameter

from hubgraph.category_commands import category_app
from hubgraph.comment_commands import comment_app
from hubgraph.config import load_settings
from hubgraph.config_commands import config_app
from hubgraph.discussion_commands import discussion_app
from hubgraph.errors import HubGraphError
from hubgraph.executor import QueryExecutor
from hubgraph.field_commands import field_app
from hubgraph.pagination import Page
from hubgraph.project_commands import project_app
from hubgraph.services import ResourceService
from hubgraph.view_commands import view_app

logger = structlog.get_logger()

S = TypeVar("S", bound=ResourceService)

app = App(
    help="hubgraph - GitHub Discussions and Projects over GraphQL",
)

app.command(discussion_app)
app.command(comment_app)
app.command(category_app)
app.command(project_app)
app.command(view_app)
app.command(field_app)
app.command(config_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()))


def get_executor() -> QueryExecutor:
    """Build an executor from the configured settings."""
    settings = load_settings()
    if not settings.token:
        raise ValueError(
            "GitHub token not configured. Set it using:\n"
            "  hubgraph config set github.token <token>\n"
            "or export GITHUB_TOKEN"
        )
    return QueryExecutor(token=settings.token, base_url=settings.base_url, timeout=settings.timeout)


def get_service(service_class: type[S]) -> S:
    """Instantiate a resource service bound to a fresh executor."""
    return service_class(get_executor())


def collect_changes(**values: Any) -> dict[str, Any]:
    """Keep only the options the user actually passed."""
    return {key: value for key, value in values.items() if value is not None}


def print_page(result: Page[Any], render: Callable[[Any], None], noun: str) -> None:
    """Print one page of items plus the cursor needed to fetch the next one."""
    total = f" of {result.total_count}" if result.total_count is not None else ""
    print(f"Found {len(result.items)}{total} {noun}:\n")
    for item in result.items:
        render(item)
    if result.has_next_page:
        print(f"\nMore results available: --after {result.end_cursor}")


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    try:
        app(tokens)
    except HubGraphError as e:
        print(f"Error [{e.kind}]: {e.message}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def run() -> None:
    """Console script entry point."""
    app.meta()


if __name__ == "__main__":
    run()
