"""
Transaction Exceptions

Typical usage:
    try:
        with ManagedTransaction(client) as txn:
            books.insert_many(docs, session=txn.session)
    except TransactionAbortedError as e:
        print(f"Nothing was written: {e}")
"""

from mongo_ops_exceptions import TransactionError


class TransactionAbortedError(TransactionError):
    """
    Raised after a transaction was rolled back because an operation inside
    it, or its commit, failed. The original failure is the __cause__.
    """
    pass


class TransactionStateError(TransactionError):
    """
    Raised when commit or abort is requested from a state that does not
    allow it (not started, or already committed/aborted).
    """

    def __init__(self, message: str, state: str = None):
        super().__init__(message)
        self.state = state
