"""GraphQL query executor built on PyGithub's requester."""

import asyncio
from dataclasses import dataclass, field
from typing import Any

import requests
import structlog
from github import Auth, Github, GithubException

from hubgraph.errors import PermissionDeniedError, TransportError, translate

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class QueryResult:
    """Raw outcome of one GraphQL call.

    ``data`` may be partially populated even when ``errors`` is non-empty.
    """

    data: dict[str, Any] | None
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class QueryExecutor:
    """Sends GraphQL documents to the GitHub API with bearer-token auth."""

    def __init__(
        self,
        token: str | None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the executor.

        Args:
            token: GitHub personal access token
            base_url: REST base URL; GraphQL is served at ``/graphql`` below it
            timeout: Per-request timeout in seconds
        """
        if not token:
            raise PermissionDeniedError("GitHub token required")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # GitHub Enterprise serves GraphQL at /api/graphql next to the /api/v3 REST root.
        if self.base_url.endswith("/api/v3"):
            self.graphql_url = self.base_url[: -len("v3")] + "graphql"
        else:
            self.graphql_url = "/graphql"

        logger.debug("Initializing query executor", base_url=self.base_url, timeout=timeout)
        auth = Auth.Token(token)
        # Mutations are not idempotent, so the client must never re-send a request.
        self.client = Github(auth=auth, base_url=self.base_url, timeout=timeout, retry=None)
        logger.info("Query executor initialized", base_url=self.base_url)

    def execute(self, document: str, variables: dict[str, Any] | None = None) -> QueryResult:
        """Send one query or mutation and split the envelope into data and errors.

        Transport failures are raised as typed errors; GraphQL errors are returned.
        """
        variables = variables or {}
        logger.debug("Executing GraphQL document", variables=sorted(variables))

        # Get the underlying requester for direct API access
        requester = self.client._Github__requester

        try:
            _, envelope = requester.requestJsonAndCheck(
                "POST",
                self.graphql_url,
                input={"query": document, "variables": variables},
            )
        except (GithubException, requests.exceptions.RequestException) as e:
            error = translate([], transport_failure=e)
            logger.warning("GraphQL request failed", kind=error.kind, error=error.message)
            raise error from e

        if not isinstance(envelope, dict):
            raise TransportError(f"Unexpected GraphQL response: {envelope!r}")

        errors = envelope.get("errors") or []
        if errors:
            logger.warning("GraphQL response carried errors", count=len(errors))
        return QueryResult(data=envelope.get("data"), errors=list(errors))

    async def execute_async(self, document: str, variables: dict[str, Any] | None = None) -> QueryResult:
        """Run :meth:`execute` in a worker thread bounded by the executor timeout.

        Cancelling the awaiting task stops the wait at once and propagates the
        cancellation; the abandoned HTTP call is left to its own socket timeout.
        """
        try:
            return await asyncio.wait_for(asyncio.to_thread(self.execute, document, variables), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning("GraphQL request timed out", timeout=self.timeout)
            raise TransportError(f"GraphQL request timed out after {self.timeout}s") from e
        except asyncio.CancelledError:
            logger.info("GraphQL request cancelled by caller")
            raise
