"""
Find One Example

Demonstrates a point lookup with a sort and a projection:
- Filter on the title
- Take the match with the highest IMDb rating
- Return only the title and the imdb subdocument

No match is not an error: the example simply ends.
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
print_json = example_utils.print_json
run_example = example_utils.run_example


def main():
    print_section("Find One Document")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        movies = DocumentManager(conn.collection("movies", database="sample_mflix"))

        movie = movies.find_one(
            {"title": "The Room"},
            projection={"_id": 0, "title": 1, "imdb": 1},
            sort={"imdb.rating": -1}
        )
        if movie is None:
            return

        print_json(movie)


if __name__ == "__main__":
    run_example(main)
