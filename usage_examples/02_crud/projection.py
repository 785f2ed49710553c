"""
Projection Example

Starts from a fresh tea.ratings collection with five documents, then shows:
- an exclusion projection (every field but rating)
- an inclusion projection (type and rating, without _id)
- the same inclusion written as a $project aggregation stage
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
print_documents = example_utils.print_documents
run_example = example_utils.run_example


RATINGS = [
    TeaRating(type="Masala", rating=10),
    TeaRating(type="Assam", rating=5),
    TeaRating(type="Oolong", rating=7),
    TeaRating(type="Earl Grey", rating=8),
    TeaRating(type="English Breakfast", rating=5),
]


def main():
    print_section("Projection")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        ratings = DocumentManager(conn.collection("ratings", database="tea"))

        ratings.drop()
        ratings.insert_many(RATINGS)

        print_step(1, "Exclude the rating field")
        print_documents(ratings.find(projection={"rating": 0}))

        print_step(2, "Include only type and rating")
        print_documents(ratings.find(projection={"type": 1, "rating": 1, "_id": 0}))

        print_step(3, "Include type and rating with $project")
        print_documents(ratings.aggregate([{"$project": {"type": 1, "rating": 1, "_id": 0}}]))


if __name__ == "__main__":
    run_example(main)
