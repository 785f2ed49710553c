"""
Transaction Operations Module

Multi-statement transactions for the usage examples:
- Session-scoped start/commit with a configurable write concern
- Explicit abort before any failure is surfaced
- Guaranteed session cleanup

Transactions require a replica set or sharded deployment.
"""

from .manager import ManagedTransaction, TransactionState, run_transaction
from .transaction_exceptions import TransactionAbortedError, TransactionStateError

__all__ = [
    'ManagedTransaction',
    'TransactionState',
    'run_transaction',
    'TransactionAbortedError',
    'TransactionStateError'
]
