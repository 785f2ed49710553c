"""
Replace One Example (models)

Replaces a restaurant document with a Restaurant model. Fields the model
does not set are left out of the stored document.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, Restaurant
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
    print_section("Replace One Document")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        restaurants = DocumentManager(conn.collection("restaurants", database="sample_restaurants"))

        replacement = Restaurant(name="Rizzo's Pizza", cuisine="Pizza/American")
        summary = restaurants.replace_one({"name": "Rizzo's Fine Pizza"}, replacement)

        print(f"Number of documents replaced: {summary.modified_count}")


if __name__ == "__main__":
    run_example(main)
