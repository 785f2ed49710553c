"""
Insert Many Example

Inserts several haikus in one call and prints the number of inserted
documents together with their generated ids.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, Haiku
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
print_info = example_utils.print_info
run_example = example_utils.run_example


HAIKUS = [
    Haiku(title="Record of a Shriveled Datum", text="No bytes, no problem. Just insert a document, in MongoDB"),
    Haiku(title="Showcasing a Blossoming Binary", text="Binary data, safely stored with GridFS. Bucket the data"),
]


def main():
    print_section("Insert Many Documents")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        haikus = DocumentManager(conn.collection("haikus", database="insertDB"))

        summary = haikus.insert_many(HAIKUS)

        print(f"{summary.inserted_count} documents were inserted with the following _ids:")
        for inserted_id in summary.inserted_ids:
            print_info("_id", inserted_id)


if __name__ == "__main__":
    run_example(main)
