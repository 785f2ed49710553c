"""
Quick Start Example

Demonstrates the shape every example follows: load the connection string,
connect with a fixed 20 second bound on the connect step, look up one movie,
print it, and close the connection.

A title that matches nothing is reported and the example ends normally.
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


MOVIE_TITLE = "Back to the Future"
CONNECT_TIMEOUT_MS = 20000


def main():
    """Find a movie by title in sample_mflix.movies."""
    print_section("MongoDB Quick Start")

    settings = load_settings()
    with ConnectionManager(settings, serverSelectionTimeoutMS=CONNECT_TIMEOUT_MS) as conn:
        movies = DocumentManager(conn.collection("movies", database="sample_mflix"))

        movie = movies.find_one({"title": MOVIE_TITLE})
        if movie is None:
            print(f"No document was found with the title {MOVIE_TITLE}")
            return

        print_json(movie)


if __name__ == "__main__":
    run_example(main)
