"""
Search Index Operations Exceptions

This module defines a granular exception hierarchy for search index
operations. Each exception type corresponds to a specific failure mode.

Typical usage:
    from index_operations import SearchIndexTimeoutError

    try:
        index_manager.wait_until_queryable("vector_index")
    except SearchIndexTimeoutError as e:
        print(f"Index not ready after {e.timeout_seconds}s")
"""

from typing import Optional

from mongo_ops_exceptions import OperationTimeoutError, SearchIndexError


class SearchIndexOperationError(SearchIndexError):
    """
    Base exception for all search index operation errors.

    Attributes:
        index_name: Name of the index involved, when known
    """
    def __init__(self, message: str, index_name: Optional[str] = None):
        super().__init__(message)
        self.index_name = index_name


class SearchIndexNotFoundError(SearchIndexOperationError):
    """
    Raised when a search index is not listed on the collection, for example
    when it is dropped while a readiness poll is still running.
    """
    pass


class SearchIndexDefinitionError(SearchIndexOperationError):
    """
    Raised when an index definition is rejected before it is sent.

    Attributes:
        parameter: Name of the offending definition parameter
    """
    def __init__(self, message: str, index_name: Optional[str] = None, parameter: Optional[str] = None):
        super().__init__(message, index_name=index_name)
        self.parameter = parameter


class SearchIndexBuildError(SearchIndexOperationError):
    """
    Raised when the server reports that an index build failed.
    """
    pass


class SearchIndexTimeoutError(SearchIndexOperationError, OperationTimeoutError):
    """
    Raised when an index does not become queryable before the deadline.
    Also an OperationTimeoutError, so callers can handle every deadline alike.

    Attributes:
        timeout_seconds: The deadline that was exceeded
        attempts: Number of readiness checks performed
    """
    def __init__(
        self,
        message: str,
        index_name: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        attempts: Optional[int] = None
    ):
        super().__init__(message, index_name=index_name)
        self.timeout_seconds = timeout_seconds
        self.attempts = attempts
