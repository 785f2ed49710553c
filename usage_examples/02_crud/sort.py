"""
Sort Example

Sorts courses by enrollment in both directions, by two keys, and with a
$sort aggregation stage.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, Course
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


COURSES = [
    Course(title="World Fiction", enrollment=35),
    Course(title="Abstract Algebra", enrollment=60),
    Course(title="Modern Poetry", enrollment=12),
    Course(title="Plate Tectonics", enrollment=35),
]


def main():
    print_section("Sort")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        courses = DocumentManager(conn.collection("courses", database="db"))

        courses.drop()
        courses.insert_many(COURSES)
        projection = {"_id": 0}

        print_step(1, "Ascending enrollment")
        print_documents(courses.find(projection=projection, sort=[("enrollment", 1)]))

        print_step(2, "Descending enrollment")
        print_documents(courses.find(projection=projection, sort=[("enrollment", -1)]))

        print_step(3, "Descending enrollment, then ascending title")
        print_documents(courses.find(projection=projection, sort=[("enrollment", -1), ("title", 1)]))

        print_step(4, "Descending enrollment with $sort")
        print_documents(courses.aggregate([
            {"$sort": {"enrollment": -1}},
            {"$project": projection}
        ]))


if __name__ == "__main__":
    run_example(main)
