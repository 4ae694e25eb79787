"""Tests for categories, views and fields, including their unsupported operations."""

import typing
from collections.abc import Callable
from unittest.mock import Mock

import pytest

from hubgraph.errors import UnsupportedError
from hubgraph.models import ViewFieldConfiguration
from hubgraph.services import CategoryService, FieldService, ViewService


def test_list_categories(mock_executor: Mock, respond: Callable[..., None]) -> None:
    """Test listing discussion categories."""
    respond(
        {
            "repository": {
                "discussionCategories": {
                    "totalCount": 1,
                    "pageInfo": {"hasNextPage": False},
                    "nodes": [{"id": "DIC_1", "name": "Ideas", "isAnswerable": False}],
                }
            }
        }
    )

    result = CategoryService(mock_executor).list("octo", "repo")

    assert [c.name for c in result.items] == ["Ideas"]
    _, variables = mock_executor.execute.call_args[0]
    assert variables["first"] == 100


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.create("R_1", "Ideas"),
        lambda s: s.update("DIC_1", name="Other"),
        lambda s: s.delete("DIC_1"),
    ],
)
def test_category_mutations_unsupported(mock_executor: Mock, call: Callable) -> None:
    """Test that category mutations fail without a network call."""
    with pytest.raises(UnsupportedError):
        call(CategoryService(mock_executor))
    mock_executor.execute.assert_not_called()


def test_get_view(mock_executor: Mock, respond: Callable[..., None]) -> None:
    """Test reading a project view."""
    respond({"node": {"id": "PVTV_1", "number": 1, "name": "Board", "layout": "BOARD_LAYOUT", "project": {"id": "PVT_1"}}})

    view = ViewService(mock_executor).get("PVTV_1")

    assert view.layout == "BOARD_LAYOUT"
    assert view.project_id == "PVT_1"


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.create("PVT_1", "Board"),
        lambda s: s.update("PVTV_1", name="Table"),
        lambda s: s.delete("PVTV_1"),
        lambda s: s.copy("PVTV_1"),
    ],
)
def test_view_mutations_unsupported(mock_executor: Mock, call: Callable) -> None:
    """Test that view mutations fail without a network call."""
    with pytest.raises(UnsupportedError):
        call(ViewService(mock_executor))
    mock_executor.execute.assert_not_called()


def test_list_view_fields(mock_executor: Mock, respond: Callable[..., None]) -> None:
    """Test that view field visibility comes from the view's field list."""
    respond(
        {
            "node": {
                "id": "PVTV_1",
                "fields": {"nodes": [{"id": "F_2", "name": "Status", "dataType": "SINGLE_SELECT"}]},
                "project": {
                    "id": "PVT_1",
                    "fields": {
                        "nodes": [
                            {"id": "F_1", "name": "Title", "dataType": "TITLE"},
                            {"id": "F_2", "name": "Status", "dataType": "SINGLE_SELECT"},
                        ]
                    },
                },
            }
        }
    )

    configurations = FieldService(mock_executor).list_view_fields("PVTV_1")

    assert [(c.field_name, c.is_visible) for c in configurations] == [("Title", False), ("Status", True)]
    assert all(c.width is None for c in configurations)


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.add_view_field("PVTV_1", "F_1"),
        lambda s: s.update_view_field("PVTV_1", "F_1", width=300),
        lambda s: s.remove_view_field("PVTV_1", "F_1"),
        lambda s: s.set_view_sort("PVTV_1", "F_1"),
        lambda s: s.clear_view_sort("PVTV_1"),
        lambda s: s.set_view_group("PVTV_1", "F_1"),
        lambda s: s.clear_view_group("PVTV_1"),
    ],
)
def test_view_layout_operations_unsupported(mock_executor: Mock, call: Callable) -> None:
    """Test that layout operations fail instead of fabricating success."""
    with pytest.raises(UnsupportedError):
        call(FieldService(mock_executor))
    mock_executor.execute.assert_not_called()


def test_list_view_fields_annotation() -> None:
    """Test that the view field listing is annotated with the builtin list."""
    hints = typing.get_type_hints(FieldService.list_view_fields)

    assert hints["return"] == list[ViewFieldConfiguration]
