"""
Document Model Example

Stores BlogPost models in sample_training.blogPosts and reads them back.
Field aliases set the stored names (word_count stays word_count, the id
maps to _id) and unset fields are omitted from the stored document.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager, BlogPost
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
print_step = example_utils.print_step
print_json = example_utils.print_json
run_example = example_utils.run_example


POSTS = [
    BlogPost(
        title="Annuals vs. Perennials?",
        author="Sam Lee",
        word_count=682,
        tags=["seasons", "gardening", "flower"]
    ),
    # No tags: the field is left out of the stored document
    BlogPost(title="Ladybugs as Pest Control", author="Ari Patel", word_count=431),
]


def main():
    print_section("Document Models")

    settings = load_settings()
    with ConnectionManager(settings) as conn:
        posts = DocumentManager(conn.collection("blogPosts", database="sample_training"))

        print_step(1, "Insert blog posts")
        posts.insert_many(POSTS)

        print_step(2, "Read them back")
        for document in posts.find():
            print_json(BlogPost.from_document(document).to_document())


if __name__ == "__main__":
    run_example(main)
