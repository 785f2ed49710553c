"""
Update One Example

Sets the average rating of one restaurant, addressed by its ObjectId. The
update document is built from a model, so the stored field name comes
from the model's alias (avg_rating).
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from bson import ObjectId

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, RestaurantRatingUpdate
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
run_example = example_utils.run_example


RESTAURANT_ID = "5eb3d668b31de5d588f4292b"


def main():
    print_section("Update One Document")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        restaurants = DocumentManager(conn.collection("restaurants", database="sample_restaurants"))

        summary = restaurants.update_one(
            {"_id": ObjectId(RESTAURANT_ID)},
            {"$set": RestaurantRatingUpdate(average_rating=4.4)}
        )

        print(f"Documents updated: {summary.modified_count}")


if __name__ == "__main__":
    run_example(main)
