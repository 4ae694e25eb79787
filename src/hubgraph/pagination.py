"""Cursor-based pagination over GraphQL connection results."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import structlog

from hubgraph.errors import ValidationError

logger = structlog.get_logger()

T = TypeVar("T")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """Caller-owned continuation state: page size plus the cursor to resume after."""

    first: int = 20
    after: str | None = None

    def __post_init__(self) -> None:
        check_page_size(self.first)

    def variables(self) -> dict[str, Any]:
        return {"first": self.first, "after": self.after}


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a connection."""

    items: list[T] = field(default_factory=list)
    has_next_page: bool = False
    end_cursor: str | None = None
    total_count: int | None = None


def check_page_size(page_size: Any) -> int:
    """Validate a page size against the remote bounds."""
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValidationError(f"Page size must be an integer, got {page_size!r}")
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValidationError(f"Page size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")
    return page_size


def _connection_nodes(connection: dict[str, Any]) -> list[Any]:
    if "nodes" in connection:
        nodes = connection.get("nodes") or []
    elif "edges" in connection:
        nodes = [edge.get("node") for edge in connection.get("edges") or [] if isinstance(edge, dict)]
    else:
        raise ValidationError("Connection has neither 'nodes' nor 'edges'")
    if not isinstance(nodes, list):
        raise ValidationError(f"Connection nodes must be a list, got {type(nodes).__name__}")
    # Nodes the viewer cannot see come back as null.
    return [node for node in nodes if node is not None]


def page(
    connection: dict[str, Any] | None,
    page_size: int,
    map_node: Callable[[dict[str, Any]], T] | None = None,
) -> Page[T]:
    """Turn one raw connection into a page of (optionally mapped) items.

    A missing connection is an empty, final page. At most ``page_size`` items
    are returned; the walker never fetches further pages by itself.
    """
    check_page_size(page_size)

    if connection is None:
        return Page(items=[], has_next_page=False, end_cursor=None, total_count=0)
    if not isinstance(connection, dict):
        raise ValidationError(f"Connection must be an object, got {type(connection).__name__}")

    nodes = _connection_nodes(connection)
    if len(nodes) > page_size:
        logger.warning("Connection returned more nodes than requested", requested=page_size, received=len(nodes))
        nodes = nodes[:page_size]

    page_info = connection.get("pageInfo") or {}
    has_next_page = bool(page_info.get("hasNextPage", False))
    end_cursor = page_info.get("endCursor")

    items = [map_node(node) for node in nodes] if map_node else list(nodes)
    logger.debug("Paged connection", count=len(items), has_next_page=has_next_page)
    return Page(
        items=items,
        has_next_page=has_next_page,
        end_cursor=end_cursor,
        total_count=connection.get("totalCount"),
    )
