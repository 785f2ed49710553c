"""
MongoDB Operations Exceptions

This module defines custom exceptions for the Mongo_Ops examples package
to provide clear error handling and reporting.

A lookup that matches nothing is not an error anywhere in this package:
operations return None, an empty list or a zero count instead.
"""


class MongoOpsError(Exception):
    """Base exception for all Mongo_Ops errors"""
    pass


class ConnectionError(MongoOpsError):
    """Raised when connection to the MongoDB deployment fails"""
    pass


class ConfigurationError(MongoOpsError):
    """Raised when configuration is invalid or missing"""
    pass


class OperationError(MongoOpsError):
    """Base exception for failed database operations"""

    def __init__(self, message: str, operation: str = None):
        super().__init__(message)
        self.operation = operation


class QueryError(OperationError):
    """Raised when a find, count or aggregate operation fails"""
    pass


class InsertionError(OperationError):
    """Raised when document insertion fails"""
    pass


class UpdateError(OperationError):
    """Raised when an update or replace operation fails"""
    pass


class DeletionError(OperationError):
    """Raised when a delete operation fails"""
    pass


class CommandError(OperationError):
    """Raised when a database command fails"""
    pass


class TransactionError(MongoOpsError):
    """Base exception for transaction errors"""
    pass


class SearchIndexError(MongoOpsError):
    """Raised when there's an issue with search index operations"""
    pass


class OperationTimeoutError(MongoOpsError):
    """Raised when an operation times out"""
    pass
