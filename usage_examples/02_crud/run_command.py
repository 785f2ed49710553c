"""
Run Command Example

Runs listCollections as a cursor-returning command against the plants
database, keeping only collections that are not read-only.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import run_command_cursor
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
print_documents = example_utils.print_documents
run_example = example_utils.run_example


def main():
    print_section("Run a Cursor Command")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        collections = run_command_cursor(
            conn.database("plants"),
            {"listCollections": 1, "filter": {"info.readOnly": False}}
        )
        print_documents(collections)


if __name__ == "__main__":
    run_example(main)
