"""
Operation Entities

Defines Pydantic models for the results of write operations, so that every
example reports inserted ids and matched/modified/deleted counts the same way.

Typical usage:
    summary = manager.delete_many({"runtime": {"$gt": 800}})
    print(f"Documents deleted: {summary.deleted_count}")
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WriteSummary(BaseModel):
    """
    Outcome of a single write operation.

    Counts are only meaningful when the write was acknowledged; for
    unacknowledged writes they stay at zero.

    Attributes:
        operation: Name of the driver operation (insert_one, update_many, ...)
        acknowledged: Whether the server acknowledged the write
        inserted_ids: Ids of inserted documents, in insertion order
        matched_count: Documents matched by an update or replace filter
        modified_count: Documents actually changed
        deleted_count: Documents removed
        upserted_id: Id of the document created by an upsert
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    operation: str
    acknowledged: bool = True
    inserted_ids: List[Any] = Field(default_factory=list)
    matched_count: int = 0
    modified_count: int = 0
    deleted_count: int = 0
    upserted_id: Optional[Any] = None

    @property
    def inserted_count(self) -> int:
        return len(self.inserted_ids)

    @classmethod
    def from_insert_one(cls, result) -> "WriteSummary":
        return cls(operation="insert_one", acknowledged=result.acknowledged,
                   inserted_ids=[result.inserted_id])

    @classmethod
    def from_insert_many(cls, result) -> "WriteSummary":
        return cls(operation="insert_many", acknowledged=result.acknowledged,
                   inserted_ids=list(result.inserted_ids))

    @classmethod
    def from_update(cls, operation: str, result) -> "WriteSummary":
        if not result.acknowledged:
            return cls(operation=operation, acknowledged=False)
        return cls(operation=operation, matched_count=result.matched_count,
                   modified_count=result.modified_count, upserted_id=result.upserted_id)

    @classmethod
    def from_delete(cls, operation: str, result) -> "WriteSummary":
        if not result.acknowledged:
            return cls(operation=operation, acknowledged=False)
        return cls(operation=operation, deleted_count=result.deleted_count)
