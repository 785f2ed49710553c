"""
Update Many Example

Sets the average rating of every pizza restaurant in Brooklyn. Both the
filter and the $set payload are models.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, RestaurantFilter, RestaurantRatingUpdate
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
    print_section("Update Many Documents")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        restaurants = DocumentManager(conn.collection("restaurants", database="sample_restaurants"))

        summary = restaurants.update_many(
            RestaurantFilter(cuisine="Pizza", borough="Brooklyn"),
            {"$set": RestaurantRatingUpdate(average_rating=4.5)}
        )

        print(f"Number of documents updated: {summary.modified_count}")


if __name__ == "__main__":
    run_example(main)
