"""
Delete One Example

Deletes the first restaurant named "New Corner", then the first movie
titled "Twilight" from the quick start dataset. Deleting nothing is
reported as a zero count, not as an error.
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
print_step = example_utils.print_step
run_example = example_utils.run_example


def main():
    print_section("Delete One Document")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        restaurants = DocumentManager(conn.collection("restaurants", database="sample_restaurants"))
        movies = DocumentManager(conn.collection("movies", database="sample_mflix"))

        print_step(1, "Delete a restaurant by name")
        summary = restaurants.delete_one({"name": "New Corner"})
        print(f"{summary.deleted_count} document(s) deleted.")

        print_step(2, "Delete a movie by title")
        summary = movies.delete_one({"title": "Twilight"})
        print(f"Number of documents deleted: {summary.deleted_count}")


if __name__ == "__main__":
    run_example(main)
