"""
Compound Operations Example

Demonstrates the atomic find-and-modify operations on tea.ratings:
- find_one_and_delete returns the deleted document
- find_one_and_replace returns the document after the replacement
- find_one_and_update returns the document after the update
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, TeaRating
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
print_step = example_utils.print_step
print_json = example_utils.print_json
run_example = example_utils.run_example


RATINGS = [
    TeaRating(type="Masala", rating=10),
    TeaRating(type="Matcha", rating=7),
    TeaRating(type="Assam", rating=4),
    TeaRating(type="Oolong", rating=9),
    TeaRating(type="Chrysanthemum", rating=5),
]


def main():
    print_section("Compound Operations")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        ratings = DocumentManager(conn.collection("ratings", database="tea"))

        print_step(1, "Insert sample ratings")
        ratings.insert_many(RATINGS)

        print_step(2, "Find and delete")
        deleted = ratings.find_one_and_delete({"type": "Assam"})
        print("Deleted document:")
        print_json(deleted)

        print_step(3, "Find and replace")
        replaced = ratings.find_one_and_replace(
            {"type": "English Breakfast"},
            TeaRating(type="Ceylon", rating=6),
            return_after=True
        )
        print("Replacement document:")
        print_json(replaced)

        print_step(4, "Find and update")
        updated = ratings.find_one_and_update(
            {"type": "Oolong"},
            {"$set": {"rating": 9}},
            return_after=True
        )
        print("Updated document:")
        print_json(updated)


if __name__ == "__main__":
    run_example(main)
