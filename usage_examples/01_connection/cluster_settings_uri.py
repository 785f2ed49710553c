"""
Cluster Settings via Connection String

Demonstrates passing cluster settings as connection string options:
- serverSelectionTimeoutMS: how long to wait for a suitable server
- localThresholdMS: latency window for choosing among suitable servers
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


# Connection string with cluster settings options
URI = "mongodb://localhost:27017/?serverSelectionTimeoutMS=10000&localThresholdMS=15"


def main():
    print_section("Cluster Settings (Connection String)")

    settings = load_settings()
    settings.connection.uri = URI

    with ConnectionManager(settings) as conn:
        options = conn.client.options
        print_info("Server selection timeout", f"{options.server_selection_timeout}s")
        print_info("Local threshold", f"{options.local_threshold_ms}ms")
        print_success("Connected to MongoDB with cluster settings options")


if __name__ == "__main__":
    run_example(main)
