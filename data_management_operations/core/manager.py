"""
Document Manager

Thin wrapper around a driver collection used by the usage examples. Every
method issues exactly one driver call and blocks for its response.

Error handling follows the two-tier rule of the examples:
- a filter that matches nothing is a normal outcome (None, [] or a zero count)
- every driver failure is re-raised as an OperationError subclass carrying
  the name of the failed operation
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Type, Union

from pymongo import ReturnDocument
from pymongo.client_session import ClientSession
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from data_management_operations.models.documents import to_document
from data_management_operations.models.entities import WriteSummary
from mongo_ops_exceptions import (
    CommandError,
    DeletionError,
    InsertionError,
    OperationError,
    QueryError,
    UpdateError,
)

logger = logging.getLogger(__name__)

SortSpec = Union[Mapping[str, int], Sequence[Tuple[str, int]]]


@contextmanager
def _translate_errors(error_type: Type[OperationError], operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        logger.error(f"{operation} failed: {e}")
        raise error_type(f"{operation} failed: {e}", operation=operation) from e


def _sort_list(sort: Optional[SortSpec]) -> Optional[List[Tuple[str, int]]]:
    if sort is None:
        return None
    if isinstance(sort, Mapping):
        return list(sort.items())
    return list(sort)


class DocumentManager:
    """
    Runs document operations against one collection.

    Filters, documents and updates may be plain dicts or document models;
    models are serialized by alias before they reach the driver.

    Example:
        >>> manager = DocumentManager(conn.collection("movies"))
        >>> manager.find_one({"title": "The Room"}, projection={"_id": 0, "title": 1, "imdb": 1})
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    @property
    def namespace(self) -> str:
        return self.collection.full_name

    # Reads

    def find_one(
        self,
        filter: Optional[Any] = None,
        projection: Optional[Mapping[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        session: Optional[ClientSession] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Point lookup.

        Returns:
            The first matching document, or None when nothing matches
        """
        with _translate_errors(QueryError, "find_one"):
            document = self.collection.find_one(
                to_document(filter or {}), projection=projection, sort=_sort_list(sort), session=session
            )
        if document is None:
            logger.debug(f"No document in {self.namespace} matched {filter}")
        return document

    def find(
        self,
        filter: Optional[Any] = None,
        projection: Optional[Mapping[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        limit: int = 0,
        session: Optional[ClientSession] = None
    ) -> List[Dict[str, Any]]:
        """Return every matching document (limit=0 means no limit)."""
        with _translate_errors(QueryError, "find"):
            cursor = self.collection.find(
                to_document(filter or {}), projection=projection, sort=_sort_list(sort),
                limit=limit, session=session
            )
            return list(cursor)

    def count_documents(self, filter: Optional[Any] = None, session: Optional[ClientSession] = None) -> int:
        """Exact number of documents matching the filter."""
        with _translate_errors(QueryError, "count_documents"):
            return self.collection.count_documents(to_document(filter or {}), session=session)

    def estimated_document_count(self) -> int:
        """Collection size from metadata, without scanning."""
        with _translate_errors(QueryError, "estimated_document_count"):
            return self.collection.estimated_document_count()

    def aggregate(self, pipeline: Sequence[Mapping[str, Any]],
                  session: Optional[ClientSession] = None) -> List[Dict[str, Any]]:
        """Run an aggregation pipeline and return all results."""
        with _translate_errors(QueryError, "aggregate"):
            return list(self.collection.aggregate(to_document(list(pipeline)), session=session))

    # Writes

    def insert_one(self, document: Any, session: Optional[ClientSession] = None) -> WriteSummary:
        with _translate_errors(InsertionError, "insert_one"):
            result = self.collection.insert_one(to_document(document), session=session)
        logger.info(f"Inserted 1 document into {self.namespace}")
        return WriteSummary.from_insert_one(result)

    def insert_many(self, documents: Sequence[Any], ordered: bool = True,
                    session: Optional[ClientSession] = None) -> WriteSummary:
        with _translate_errors(InsertionError, "insert_many"):
            result = self.collection.insert_many(
                [to_document(document) for document in documents], ordered=ordered, session=session
            )
        summary = WriteSummary.from_insert_many(result)
        logger.info(f"Inserted {summary.inserted_count} documents into {self.namespace}")
        return summary

    def update_one(self, filter: Any, update: Any, upsert: bool = False,
                   session: Optional[ClientSession] = None) -> WriteSummary:
        with _translate_errors(UpdateError, "update_one"):
            result = self.collection.update_one(
                to_document(filter), to_document(update), upsert=upsert, session=session
            )
        return WriteSummary.from_update("update_one", result)

    def update_many(self, filter: Any, update: Any, upsert: bool = False,
                    session: Optional[ClientSession] = None) -> WriteSummary:
        with _translate_errors(UpdateError, "update_many"):
            result = self.collection.update_many(
                to_document(filter), to_document(update), upsert=upsert, session=session
            )
        return WriteSummary.from_update("update_many", result)

    def replace_one(self, filter: Any, replacement: Any, upsert: bool = False,
                    session: Optional[ClientSession] = None) -> WriteSummary:
        with _translate_errors(UpdateError, "replace_one"):
            result = self.collection.replace_one(
                to_document(filter), to_document(replacement), upsert=upsert, session=session
            )
        return WriteSummary.from_update("replace_one", result)

    def delete_one(self, filter: Any, session: Optional[ClientSession] = None) -> WriteSummary:
        with _translate_errors(DeletionError, "delete_one"):
            result = self.collection.delete_one(to_document(filter), session=session)
        return WriteSummary.from_delete("delete_one", result)

    def delete_many(self, filter: Any, session: Optional[ClientSession] = None) -> WriteSummary:
        with _translate_errors(DeletionError, "delete_many"):
            result = self.collection.delete_many(to_document(filter), session=session)
        return WriteSummary.from_delete("delete_many", result)

    # Compound operations: one atomic read-modify-write each

    def find_one_and_delete(self, filter: Any, sort: Optional[SortSpec] = None,
                            projection: Optional[Mapping[str, Any]] = None) -> Optional[Dict[str, Any]]:
        """Delete the first match and return it (None when nothing matched)."""
        with _translate_errors(DeletionError, "find_one_and_delete"):
            return self.collection.find_one_and_delete(
                to_document(filter), projection=projection, sort=_sort_list(sort)
            )

    def find_one_and_replace(self, filter: Any, replacement: Any, return_after: bool = False,
                             upsert: bool = False) -> Optional[Dict[str, Any]]:
        """Replace the first match; return the document before or after the replacement."""
        with _translate_errors(UpdateError, "find_one_and_replace"):
            return self.collection.find_one_and_replace(
                to_document(filter), to_document(replacement), upsert=upsert,
                return_document=ReturnDocument.AFTER if return_after else ReturnDocument.BEFORE
            )

    def find_one_and_update(self, filter: Any, update: Any, return_after: bool = False,
                            upsert: bool = False) -> Optional[Dict[str, Any]]:
        """Update the first match; return the document before or after the update."""
        with _translate_errors(UpdateError, "find_one_and_update"):
            return self.collection.find_one_and_update(
                to_document(filter), to_document(update), upsert=upsert,
                return_document=ReturnDocument.AFTER if return_after else ReturnDocument.BEFORE
            )

    def drop(self) -> None:
        """Drop the collection; dropping a missing collection is not an error."""
        with _translate_errors(CommandError, "drop"):
            self.collection.drop()
        logger.info(f"Dropped collection {self.namespace}")


def run_command_cursor(database: Database, command: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """
    Run a database command that returns a cursor and exhaust it.

    Example:
        >>> run_command_cursor(db, {"listCollections": 1, "filter": {"info.readOnly": False}})
    """
    name = next(iter(command), "command")
    with _translate_errors(CommandError, name):
        return list(database.cursor_command(dict(command)))
