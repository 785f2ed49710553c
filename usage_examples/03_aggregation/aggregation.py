"""
Aggregation Example

Loads nineteen tea ratings into a fresh tea.ratings collection and runs two
pipelines:
- $group: average rating and number of ratings per tea type
- $match, $unset, $sort, $limit: the five most visited entries rated above 8
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


# (type, rating, visits)
RATINGS = [
    ("Masala", 10, 24), ("Earl Grey", 5, 7), ("Masala", 7, 10), ("Earl Grey", 9, 12),
    ("Earl Grey", 5, 4), ("Masala", 9, 18), ("Earl Grey", 8, 15), ("Masala", 9, 14),
    ("Masala", 10, 24), ("Earl Grey", 10, 19), ("Masala", 7, 13), ("Masala", 5, 8),
    ("Masala", 9, 21), ("Earl Grey", 10, 17), ("Earl Grey", 5, 5), ("Masala", 9, 19),
    ("Earl Grey", 7, 14), ("Masala", 8, 17), ("Masala", 9, 20),
]

AVERAGE_PIPELINE = [
    {"$group": {
        "_id": "$type",
        "average": {"$avg": "$rating"},
        "count": {"$sum": 1}
    }}
]

TOP_VISITED_PIPELINE = [
    {"$match": {"rating": {"$gt": 8}}},
    {"$unset": ["_id", "rating"]},
    {"$sort": {"visits": -1, "type": 1}},
    {"$limit": 5},
]


def main():
    print_section("Aggregation")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        ratings = DocumentManager(conn.collection("ratings", database="tea"))

        ratings.drop()
        summary = ratings.insert_many(
            [TeaRating(type=tea, rating=rating, visits=visits) for tea, rating, visits in RATINGS]
        )
        print(f"Number of documents inserted: {summary.inserted_count}")

        print_step(1, "Average rating per type")
        for result in ratings.aggregate(AVERAGE_PIPELINE):
            print(f"{result['_id']} has an average rating of {result['average']}")
            print(f"{result['_id']} Count: {result['count']}")

        print_step(2, "Most visited teas rated above 8")
        print_documents(ratings.aggregate(TOP_VISITED_PIPELINE))


if __name__ == "__main__":
    run_example(main)
