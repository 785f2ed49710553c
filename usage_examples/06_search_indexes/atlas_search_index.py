"""
Atlas Search Index Example

Creates a static full-text index over the title and plot of
sample_mflix.movies and waits for it to become queryable.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from index_operations import IndexOperationConfig, SearchIndexManager, atlas_search_definition
from config import SearchIndexType, load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
print_step = example_utils.print_step
print_success = example_utils.print_success
run_example = example_utils.run_example


INDEX_NAME = "atlas_search_index"


def main():
    print_section("Atlas Search Index")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        index_manager = SearchIndexManager(
            conn.collection("movies", database="sample_mflix"),
            config=IndexOperationConfig.from_settings(settings.search_index)
        )

        print_step(1, "Create the index")
        definition = atlas_search_definition({"title": "string", "plot": "string"})
        name = index_manager.create_search_index(INDEX_NAME, definition, index_type=SearchIndexType.SEARCH)
        print(f"New search index named {name} is building.")

        print_step(2, "Wait until the index is queryable")
        index_manager.wait_until_queryable(name)
        print_success(f"{name} is ready for querying.")


if __name__ == "__main__":
    run_example(main)
