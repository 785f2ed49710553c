"""
Connection Pool Settings via Connection String

Demonstrates bounding the connection pool from the connection string:
- maxPoolSize: upper bound of concurrent connections
- minPoolSize: connections kept open even when idle
- maxIdleTimeMS: how long an idle pooled connection survives
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


# Connection string with connection pool options
URI = "mongodb://localhost:27017/?maxPoolSize=50&minPoolSize=10&maxIdleTimeMS=30000"


def main():
    print_section("Connection Pool Settings")

    settings = load_settings()
    settings.connection.uri = URI

    with ConnectionManager(settings) as conn:
        pool_options = conn.client.options.pool_options
        print_info("Max pool size", pool_options.max_pool_size)
        print_info("Min pool size", pool_options.min_pool_size)
        print_info("Max idle time", f"{pool_options.max_idle_time_seconds}s")
        print_success("Connected to MongoDB with connection pool options")


if __name__ == "__main__":
    run_example(main)
