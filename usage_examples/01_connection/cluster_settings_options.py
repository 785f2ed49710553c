"""
Cluster Settings via Client Options

Demonstrates setting the same cluster settings as typed settings instead of
connection string options. The connection string comes from MONGODB_URI.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from config import load_settings
# Import usage_examples utils (not a project package)
import importlib.util
utils_file_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'utils.py'))
spec = importlib.util.spec_from_file_location("example_utils", utils_file_path)
example_utils = importlib.util.module_from_spec(spec)
spec.loader.exec_module(example_utils)
print_section = example_utils.print_section
print_info = example_utils.print_info
print_success = example_utils.print_success
run_example = example_utils.run_example


def main():
    print_section("Cluster Settings (Client Options)")

    settings = load_settings()
    settings.connection.server_selection_timeout_ms = 10000
    settings.connection.local_threshold_ms = 15

    with ConnectionManager(settings) as conn:
        options = conn.client.options
        print_info("Server selection timeout", f"{options.server_selection_timeout}s")
        print_info("Local threshold", f"{options.local_threshold_ms}ms")
        print_success("Connected to MongoDB with cluster settings options")


if __name__ == "__main__":
    run_example(main)
