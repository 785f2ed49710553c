"""
Transaction Example

Inserts three books as one atomic unit: either all of them are committed
or none of them is visible.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, Book
from transaction_operations import run_transaction
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
run_example = example_utils.run_example


BOOKS = [
    Book(title="The Bluest Eye", author="Toni Morrison"),
    Book(title="Sula", author="Toni Morrison"),
    Book(title="Song of Solomon", author="Toni Morrison"),
]


def main():
    print_section("Multi-Document Transaction")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        books = DocumentManager(conn.collection("myColl", database="myDB"))

        summary = run_transaction(
            conn.client,
            lambda session: books.insert_many(BOOKS, session=session),
            write_concern=settings.transaction.write_concern
        )

        print(summary.inserted_ids)


if __name__ == "__main__":
    run_example(main)
