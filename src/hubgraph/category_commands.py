"""Discussion category commands for the hubgraph CLI."""

from cyclopts import App

from hubgraph.models import DiscussionCategory
from hubgraph.services import CategoryService

category_app = App(name="category", help="Inspect discussion categories")


def _print_category(category: DiscussionCategory) -> None:
    answerable = " (answerable)" if category.is_answerable else ""
    emoji = f"{category.emoji} " if category.emoji else ""
    print(f"{emoji}{category.id}: {category.name}{answerable}")


@category_app.command(name="list")
def list_categories(owner: str, name: str, page_size: int = 100, after: str | None = None) -> None:
    """List discussion categories of a repository."""
    from hubgraph.cli import get_service, print_page

    result = get_service(CategoryService).list(owner, name, page_size=page_size, after=after)
    print_page(result, _print_category, "category(ies)")


@category_app.command
def get(category_id: str) -> None:
    """Show a discussion category."""
    from hubgraph.cli import get_service

    category = get_service(CategoryService).get(category_id)
    print(f"Category: {category.id}")
    print(f"Name: {category.name}")
    if category.slug:
        print(f"Slug: {category.slug}")
    if category.description:
        print(f"Description: {category.description}")
    print(f"Answerable: {'yes' if category.is_answerable else 'no'}")
