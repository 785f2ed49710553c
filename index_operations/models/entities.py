"""
Search Index Entities

Pydantic models for the metadata returned by listSearchIndexes.

Typical usage:
    description = index_manager.describe_search_index("vector_index")
    if description is not None and description.is_ready:
        print(f"{description.name} is ready for querying")
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchIndexStatus(str, Enum):
    """
    Build status reported for a search index.

    Attributes:
        PENDING: The build has not started yet
        BUILDING: The index is being built (or rebuilt after an update)
        READY: The latest definition is built and queryable
        FAILED: The build failed
        DELETING: The index is being dropped
        STALE: The index is queryable but no longer kept up to date
        DOES_NOT_EXIST: The index is not present on the cluster
        UNKNOWN: Any status this package does not recognise
    """
    PENDING = "PENDING"
    BUILDING = "BUILDING"
    READY = "READY"
    FAILED = "FAILED"
    DELETING = "DELETING"
    STALE = "STALE"
    DOES_NOT_EXIST = "DOES_NOT_EXIST"
    UNKNOWN = "UNKNOWN"


class SearchIndexDescription(BaseModel):
    """
    Metadata of one search index.

    Attributes:
        name: Index name
        id: Server-assigned index id
        type: "search" or "vectorSearch"
        status: Build status
        queryable: Whether queries can use the index
        latest_definition: Most recently submitted definition
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    id: Optional[str] = None
    type: Optional[str] = None
    status: SearchIndexStatus = SearchIndexStatus.UNKNOWN
    queryable: bool = False
    latest_definition: Dict[str, Any] = Field(default_factory=dict, alias="latestDefinition")

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, value: Any) -> Any:
        if value is None:
            return SearchIndexStatus.UNKNOWN
        if value not in {status.value for status in SearchIndexStatus}:
            return SearchIndexStatus.UNKNOWN
        return value

    @property
    def is_ready(self) -> bool:
        """Ready means queryable; the status alone is not enough."""
        return self.queryable is True

    @property
    def is_failed(self) -> bool:
        return self.status is SearchIndexStatus.FAILED
