"""
Session Transaction Example

Inserts one book inside a transaction committed with majority write
concern. If the insert or the commit fails, the transaction is aborted
before the failure is reported.

Transactions need a replica set or a sharded cluster.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, Book
from transaction_operations import ManagedTransaction
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
run_example = example_utils.run_example


def main():
    print_section("Transaction in a Session")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        books = DocumentManager(conn.collection("myColl", database="myDB"))

        with ManagedTransaction.from_settings(conn.client, settings.transaction) as txn:
            summary = books.insert_one(Book(title="Sula", author="Toni Morrison"), session=txn.session)

        print(summary.inserted_ids[0])


if __name__ == "__main__":
    run_example(main)
