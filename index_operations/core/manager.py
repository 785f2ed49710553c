"""
Search Index Manager

Manages the lifecycle of Atlas Search and Atlas Vector Search indexes on a
collection: create, list, update, drop, and wait until a new index can be
queried.

Index creation is asynchronous on the server. After create_search_index
returns, the index is only usable once its listed metadata reports
`queryable: true`; wait_until_queryable polls for that on a fixed interval.

Typical usage:

    index_manager = SearchIndexManager(conn.collection("embedded_movies"))
    name = index_manager.create_search_index(
        "vector_index",
        vector_search_definition("plot_embedding", 1536, quantization="scalar"),
        index_type=SearchIndexType.VECTOR_SEARCH
    )
    index_manager.wait_until_queryable(name)
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Union

from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from pymongo.operations import SearchIndexModel
from tenacity import RetryCallState, RetryError, Retrying, retry_if_result, stop_after_delay, stop_never, wait_fixed

from config.settings import SearchIndexType
from index_operations.config import IndexOperationConfig
from index_operations.index_ops_exceptions import (
    SearchIndexBuildError,
    SearchIndexNotFoundError,
    SearchIndexOperationError,
    SearchIndexTimeoutError,
)
from index_operations.models.entities import SearchIndexDescription

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class SearchIndexManager:
    """
    Search index lifecycle on one collection.

    Args:
        collection: Driver collection the indexes belong to
        config: Polling configuration; defaults to IndexOperationConfig()
        sleep: Function used to wait between readiness checks
    """

    def __init__(
        self,
        collection: Collection,
        config: Optional[IndexOperationConfig] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.collection = collection
        self._config = config or IndexOperationConfig()
        self._sleep = sleep

    def create_search_index(
        self,
        name: str,
        definition: Dict[str, Any],
        index_type: Union[SearchIndexType, str] = SearchIndexType.SEARCH
    ) -> str:
        """
        Submit a search index for creation.

        Returns:
            Name of the index being built. The index is not queryable yet.
        """
        model = SearchIndexModel(definition=definition, name=name, type=SearchIndexType(index_type).value)
        try:
            created = self.collection.create_search_index(model)
        except PyMongoError as e:
            logger.error(f"Failed to create search index '{name}': {e}")
            raise SearchIndexOperationError(f"Failed to create search index '{name}': {e}",
                                            index_name=name) from e
        logger.info(f"New search index named {created} is building")
        return created

    def list_search_indexes(self, name: Optional[str] = None) -> List[SearchIndexDescription]:
        """List the collection's search indexes, or only the one called `name`."""
        try:
            raw_indexes = list(self.collection.list_search_indexes(name))
        except PyMongoError as e:
            raise SearchIndexOperationError(f"Failed to list search indexes: {e}", index_name=name) from e
        return [SearchIndexDescription.model_validate(raw) for raw in raw_indexes]

    def describe_search_index(self, name: str) -> Optional[SearchIndexDescription]:
        """Metadata of the named index, or None when it does not exist."""
        for description in self.list_search_indexes(name):
            if description.name == name:
                return description
        return None

    def update_search_index(self, name: str, definition: Dict[str, Any]) -> None:
        """
        Replace the definition of an existing index.

        The server rebuilds the index; the previous definition keeps serving
        queries until the rebuild finishes.
        """
        try:
            self.collection.update_search_index(name, definition)
        except PyMongoError as e:
            raise SearchIndexOperationError(f"Failed to update search index '{name}': {e}",
                                            index_name=name) from e
        logger.info(f"Search index {name} updated")

    def drop_search_index(self, name: str) -> None:
        try:
            self.collection.drop_search_index(name)
        except PyMongoError as e:
            raise SearchIndexOperationError(f"Failed to drop search index '{name}': {e}",
                                            index_name=name) from e
        logger.info(f"Search index {name} dropped")

    def _check_readiness(self, name: str) -> SearchIndexDescription:
        description = self.describe_search_index(name)
        if description is None:
            raise SearchIndexNotFoundError(f"Search index '{name}' does not exist", index_name=name)
        if description.is_failed:
            raise SearchIndexBuildError(f"Search index '{name}' failed to build", index_name=name)
        return description

    @staticmethod
    def _log_poll(retry_state: RetryCallState) -> None:
        description = retry_state.outcome.result()
        logger.info(
            f"Search index {description.name} not queryable yet "
            f"(status: {description.status.value}, check {retry_state.attempt_number})"
        )

    def wait_until_queryable(
        self,
        name: str,
        poll_interval: Optional[float] = None,
        timeout: Optional[float] = _UNSET
    ) -> SearchIndexDescription:
        """
        Poll until the named index reports `queryable: true`.

        Args:
            name: Index to wait for
            poll_interval: Seconds between checks; defaults to the configuration
            timeout: Deadline in seconds; defaults to the configuration.
                     None waits without a deadline.

        Returns:
            The description that reported the index as queryable

        Raises:
            SearchIndexNotFoundError: The index is not listed
            SearchIndexBuildError: The server reports a failed build
            SearchIndexTimeoutError: The deadline passed first
        """
        interval = poll_interval if poll_interval is not None else self._config.poll_interval
        deadline = self._config.build_timeout if timeout is _UNSET else timeout

        retrying = Retrying(
            retry=retry_if_result(lambda description: not description.is_ready),
            wait=wait_fixed(interval),
            stop=stop_after_delay(deadline) if deadline is not None else stop_never,
            sleep=self._sleep,
            before_sleep=self._log_poll,
        )

        logger.info(f"Polling to check if search index {name} is ready")
        try:
            description = retrying(self._check_readiness, name)
        except RetryError as e:
            attempts = e.last_attempt.attempt_number
            raise SearchIndexTimeoutError(
                f"Search index '{name}' was not queryable after {deadline} seconds",
                index_name=name,
                timeout_seconds=deadline,
                attempts=attempts
            ) from e

        logger.info(f"{name} is ready for querying")
        return description
