"""
Delete Many Example

Deletes every movie longer than 800 minutes.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager
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
    print_section("Delete Many Documents")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        movies = DocumentManager(conn.collection("movies", database="sample_mflix"))

        summary = movies.delete_many({"runtime": {"$gt": 800}})

        print(f"{summary.deleted_count} documents deleted.")


if __name__ == "__main__":
    run_example(main)
