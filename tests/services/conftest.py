"""Shared fixtures for service tests."""

from collections.abc import Callable
from unittest.mock import MagicMock, Mock

import pytest

from hubgraph.executor import QueryExecutor, QueryResult


@pytest.fixture
def mock_executor() -> Mock:
    """Create a mock executor answering with an empty data envelope."""
    executor = MagicMock(spec=QueryExecutor)
    executor.execute.return_value = QueryResult(data={}, errors=[])
    return executor


@pytest.fixture
def respond(mock_executor: Mock) -> Callable[..., None]:
    """Make the mock executor return a literal GraphQL envelope."""

    def _respond(data: dict | None = None, errors: list | None = None) -> None:
        mock_executor.execute.return_value = QueryResult(data=data, errors=errors or [])

    return _respond
