"""
Search Index Operations Module

Provides functionality for managing Atlas Search and Atlas Vector Search
indexes on a collection:
- Index creation from validated definitions
- Listing and describing indexes
- Definition updates and index drops
- Readiness polling on a fixed interval, with an optional deadline

Typical usage:

    from index_operations import (
        SearchIndexManager,
        IndexOperationConfig,
        vector_search_definition,
        SearchIndexTimeoutError
    )

    index_manager = SearchIndexManager(collection, config=IndexOperationConfig(build_timeout=600.0))
    name = index_manager.create_search_index(
        "vector_index",
        vector_search_definition("plot_embedding", 1536),
        index_type="vectorSearch"
    )
    try:
        index_manager.wait_until_queryable(name)
    except SearchIndexTimeoutError as e:
        print(f"Index not ready: {e}")
"""

# Core manager (primary interface)
from .core.manager import SearchIndexManager

# Configuration
from .config import IndexOperationConfig

# Models
from .models.entities import SearchIndexStatus, SearchIndexDescription
from .models.definitions import vector_search_definition, atlas_search_definition

# Exceptions
from .index_ops_exceptions import (
    SearchIndexOperationError,
    SearchIndexNotFoundError,
    SearchIndexDefinitionError,
    SearchIndexBuildError,
    SearchIndexTimeoutError
)

__all__ = [
    # Primary interface
    'SearchIndexManager',
    'IndexOperationConfig',

    # Models
    'SearchIndexStatus',
    'SearchIndexDescription',
    'vector_search_definition',
    'atlas_search_definition',

    # Exceptions
    'SearchIndexOperationError',
    'SearchIndexNotFoundError',
    'SearchIndexDefinitionError',
    'SearchIndexBuildError',
    'SearchIndexTimeoutError'
]
