"""
Standard Logging Example

Turns on debug logging for the driver's command component, truncates
logged documents to 25 characters and runs one insert so that the
command started/succeeded records are printed to stderr.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager
from monitoring import configure_driver_logging, reset_driver_logging
from config import LogSink, load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
run_example = example_utils.run_example


def main():
    print_section("Standard Logging")

    settings = load_settings()
    settings.logging.sink = LogSink.STANDARD
    settings.logging.max_document_length = 25
    settings.logging.component_levels = {"command": "DEBUG"}

    configure_driver_logging(settings.logging)
    try:
        with ConnectionManager(settings) as conn:
            coll = DocumentManager(conn.collection("testColl", database="testDB"))
            coll.insert_one({"item": "grapefruit"})
    finally:
        reset_driver_logging()


if __name__ == "__main__":
    run_example(main)
