"""
Managed Transactions

Wraps a bounded sequence of operations in a session-scoped transaction:

    Started -> Committed
    Started -> Aborted

Both outcomes are terminal and mutually exclusive. Leaving the block
normally commits; leaving it with an exception aborts explicitly before the
failure is surfaced. The session is ended on every exit path.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional, TypeVar, Union

from pymongo import MongoClient
from pymongo.client_session import ClientSession
from pymongo.errors import PyMongoError
from pymongo.read_concern import ReadConcern
from pymongo.write_concern import WriteConcern

from config.settings import TransactionSettings
from mongo_ops_exceptions import TransactionError
from transaction_operations.transaction_exceptions import TransactionAbortedError, TransactionStateError

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Error label on commit failures that may have been applied on the server
UNKNOWN_COMMIT_RESULT = "UnknownTransactionCommitResult"


class TransactionState(str, Enum):
    NOT_STARTED = "not_started"
    STARTED = "started"
    COMMITTED = "committed"
    ABORTED = "aborted"


def _write_concern(w: Union[str, int]) -> WriteConcern:
    # "1" from the environment means one acknowledgement, not a tag named "1"
    if isinstance(w, str) and w.isdigit():
        w = int(w)
    return WriteConcern(w=w)


class ManagedTransaction:
    """
    Context manager running its block inside one transaction.

    Example:
        >>> with ManagedTransaction(client, write_concern="majority") as txn:
        ...     coll.insert_one({"title": "Sula", "author": "Toni Morrison"}, session=txn.session)
        >>> txn.state
        <TransactionState.COMMITTED: 'committed'>
    """

    def __init__(
        self,
        client: MongoClient,
        write_concern: Union[str, int] = "majority",
        read_concern: Optional[str] = None,
        max_commit_time_ms: Optional[int] = None
    ):
        self._client = client
        self._write_concern = write_concern
        self._read_concern = read_concern
        self._max_commit_time_ms = max_commit_time_ms
        self._session: Optional[ClientSession] = None
        self._state = TransactionState.NOT_STARTED

    @classmethod
    def from_settings(cls, client: MongoClient, settings: TransactionSettings) -> "ManagedTransaction":
        return cls(client, write_concern=settings.write_concern, read_concern=settings.read_concern,
                   max_commit_time_ms=settings.max_commit_time_ms)

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def session(self) -> ClientSession:
        """Session to pass to every operation that belongs to the transaction."""
        if self._session is None:
            raise TransactionStateError("Transaction has no session", state=self._state.value)
        return self._session

    def _transaction_options(self) -> dict:
        options = {"write_concern": _write_concern(self._write_concern)}
        if self._read_concern:
            options["read_concern"] = ReadConcern(self._read_concern)
        if self._max_commit_time_ms is not None:
            options["max_commit_time_ms"] = self._max_commit_time_ms
        return options

    def start(self) -> "ManagedTransaction":
        if self._state is not TransactionState.NOT_STARTED:
            raise TransactionStateError(f"Cannot start a transaction that is {self._state.value}",
                                        state=self._state.value)
        try:
            self._session = self._client.start_session()
            self._session.start_transaction(**self._transaction_options())
        except PyMongoError as e:
            self._end_session()
            raise TransactionError(f"Failed to start transaction: {e}") from e
        self._state = TransactionState.STARTED
        logger.debug("Transaction started")
        return self

    def _require_started(self, action: str) -> None:
        if self._state is not TransactionState.STARTED:
            raise TransactionStateError(f"Cannot {action} a transaction that is {self._state.value}",
                                        state=self._state.value)

    def commit(self) -> None:
        """
        Commit the transaction.

        Raises:
            TransactionError: The outcome of the commit is unknown; the
                transaction stays started and the commit may be retried
            TransactionAbortedError: The commit failed; the transaction is
                considered aborted
        """
        self._require_started("commit")
        try:
            self._session.commit_transaction()
        except PyMongoError as e:
            if e.has_error_label(UNKNOWN_COMMIT_RESULT):
                logger.warning(f"Transaction commit result is unknown: {e}")
                raise TransactionError(f"Transaction commit result is unknown: {e}") from e
            self._state = TransactionState.ABORTED
            logger.error(f"Transaction commit failed: {e}")
            raise TransactionAbortedError(f"Transaction commit failed: {e}") from e
        self._state = TransactionState.COMMITTED
        logger.info("Transaction committed")

    def abort(self) -> None:
        """Roll back every operation issued with this transaction's session."""
        self._require_started("abort")
        try:
            self._session.abort_transaction()
        finally:
            self._state = TransactionState.ABORTED
        logger.info("Transaction aborted")

    def _end_session(self) -> None:
        if self._session is not None:
            self._session.end_session()

    def __enter__(self) -> "ManagedTransaction":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            if self._state is TransactionState.STARTED:
                if exc_type is None:
                    self.commit()
                else:
                    try:
                        self.abort()
                    except PyMongoError as abort_error:
                        raise TransactionError(f"Failed to abort transaction: {abort_error}") from exc_val
                    if isinstance(exc_val, Exception) and not isinstance(exc_val, TransactionError):
                        raise TransactionAbortedError(f"Transaction aborted: {exc_val}") from exc_val
        finally:
            self._end_session()
        return False


def run_transaction(client: MongoClient, operations: Callable[[ClientSession], T], **options: Any) -> T:
    """
    Run `operations(session)` inside a ManagedTransaction and return its result.

    The result is only returned once the commit succeeded.
    """
    with ManagedTransaction(client, **options) as txn:
        return operations(txn.session)
