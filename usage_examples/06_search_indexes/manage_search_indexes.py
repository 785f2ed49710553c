"""
Manage Search Indexes Example

Lists the search indexes of sample_mflix.embedded_movies, updates the
definition of the vector index created by vector_search_index.py and
finally drops it.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from index_operations import SearchIndexManager, vector_search_definition
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
print_step = example_utils.print_step
print_info = example_utils.print_info
print_warning = example_utils.print_warning
print_success = example_utils.print_success
run_example = example_utils.run_example


INDEX_NAME = "vector_index"


def main():
    print_section("Manage Search Indexes")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        index_manager = SearchIndexManager(conn.collection("embedded_movies", database="sample_mflix"))

        print_step(1, "List search indexes")
        for description in index_manager.list_search_indexes():
            print_info(description.name, f"{description.status.value} (queryable: {description.queryable})")

        if index_manager.describe_search_index(INDEX_NAME) is None:
            print_warning(f"Search index {INDEX_NAME} does not exist; run vector_search_index.py first")
            return

        print_step(2, "Update the index definition")
        index_manager.update_search_index(
            INDEX_NAME,
            vector_search_definition("plot_embedding", 1536, similarity="dotProduct")
        )
        print_success(f"Search index {INDEX_NAME} is rebuilding with the new definition")

        print_step(3, "Drop the index")
        index_manager.drop_search_index(INDEX_NAME)
        print_success(f"Search index {INDEX_NAME} dropped")


if __name__ == "__main__":
    run_example(main)
