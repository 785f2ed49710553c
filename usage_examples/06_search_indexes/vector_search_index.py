"""
Atlas Vector Search Index Example

Demonstrates the asynchronous index build:
1. Submit a vector index on sample_mflix.embedded_movies.plot_embedding
2. Poll every few seconds until the index reports queryable
3. Run a $vectorSearch query against it

Requires an Atlas cluster with the sample dataset loaded.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager
from index_operations import IndexOperationConfig, SearchIndexManager, vector_search_definition
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
print_note = example_utils.print_note
print_documents = example_utils.print_documents
generate_random_vectors = example_utils.generate_random_vectors
run_example = example_utils.run_example


INDEX_NAME = "vector_index"
VECTOR_FIELD = "plot_embedding"
DIMENSIONS = 1536


def main():
    print_section("Atlas Vector Search Index")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        collection = conn.collection("embedded_movies", database="sample_mflix")
        index_manager = SearchIndexManager(collection, config=IndexOperationConfig.from_settings(settings.search_index))

        print_step(1, "Create the index")
        definition = vector_search_definition(VECTOR_FIELD, DIMENSIONS, similarity="dotProduct", quantization="scalar")
        name = index_manager.create_search_index(INDEX_NAME, definition, index_type=SearchIndexType.VECTOR_SEARCH)
        print(f"New search index named {name} is building.")

        print_step(2, "Wait until the index is queryable")
        print_note("This may take up to a minute.")
        index_manager.wait_until_queryable(name)
        print_success(f"{name} is ready for querying.")

        print_step(3, "Query the index")
        query_vector = generate_random_vectors(1, DIMENSIONS)[0]
        movies = DocumentManager(collection)
        results = movies.aggregate([
            {"$vectorSearch": {
                "index": name,
                "path": VECTOR_FIELD,
                "queryVector": query_vector,
                "numCandidates": 100,
                "limit": 3
            }},
            {"$project": {"_id": 0, "title": 1, "score": {"$meta": "vectorSearchScore"}}}
        ])
        print_documents(results)


if __name__ == "__main__":
    run_example(main)
