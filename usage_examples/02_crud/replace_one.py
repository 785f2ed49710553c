"""
Replace One Example

Replaces the first movie titled "Shrek" with a new document. Replacement
keeps the _id and drops every field not present in the new document.
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


REPLACEMENT = {
    "title": "Shrek",
    "plot": "An ogre goes on a journey to rescue a princess from a dragon-guarded castle.",
}


def main():
    print_section("Replace One Document")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        movies = DocumentManager(conn.collection("movies", database="sample_mflix"))

        summary = movies.replace_one({"title": "Shrek"}, REPLACEMENT)

        print(f"Number of documents replaced: {summary.modified_count}")


if __name__ == "__main__":
    run_example(main)
