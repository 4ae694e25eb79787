"""Shared plumbing for the resource services."""

from typing import Any, NoReturn

import structlog

from hubgraph.errors import NotFoundError, UnsupportedError, ValidationError, translate
from hubgraph.executor import QueryExecutor

logger = structlog.get_logger()


class ResourceService:
    """Base class for services composing executor, translator and mapper."""

    resource = "resource"

    def __init__(self, executor: QueryExecutor) -> None:
        self.executor = executor

    def _run(self, document: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a document and return its data, raising a typed error on failure."""
        result = self.executor.execute(document, variables or {})
        if result.errors:
            error = translate(result.errors)
            logger.warning("Remote operation failed", resource=self.resource, kind=error.kind, error=error.message)
            raise error
        if result.data is None:
            raise ValidationError("GraphQL response carried neither data nor errors")
        return result.data

    def _unsupported(self, operation: str, reason: str) -> NoReturn:
        logger.warning("Unsupported operation requested", resource=self.resource, operation=operation)
        raise UnsupportedError(f"{operation} is not supported by the GitHub GraphQL API: {reason}")

    def _partial_input(self, operation: str, changes: dict[str, Any], allowed: dict[str, str]) -> dict[str, Any]:
        """Translate a partial update payload into remote input fields.

        ``allowed`` maps local field names to remote ones. Unknown fields are
        rejected before anything is sent.
        """
        unsupported = sorted(set(changes) - set(allowed))
        if unsupported:
            self._unsupported(
                operation,
                f"cannot set {', '.join(unsupported)} (supported: {', '.join(sorted(allowed))})",
            )
        if not changes:
            raise ValidationError(f"{operation} requires at least one field to change")
        return {allowed[key]: value for key, value in changes.items()}

    @staticmethod
    def _require(node: Any, description: str) -> dict[str, Any]:
        """Return a fetched node or raise NotFoundError when the remote returned null."""
        if not node:
            raise NotFoundError(f"{description} not found")
        return node
