"""
MONGODB-OIDC on GKE Example

Demonstrates workload identity authentication from a Kubernetes pod: a
machine callback reads the pod's service account token and hands it to the
driver whenever a new access token is needed.

Set MONGODB_AUTH_TOKEN_FILE to use a token mounted somewhere other than
the default service account path.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager, OIDC_MECHANISM
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
    print_section("MONGODB-OIDC Authentication (GKE)")

    settings = load_settings()
    settings.auth.mechanism = OIDC_MECHANISM
    # The callback is used only when no built-in environment is named
    settings.auth.oidc_environment = None

    print_info("Mechanism", settings.auth.mechanism)
    print_info("Token file", settings.auth.token_file)

    with ConnectionManager(settings) as conn:
        collections = conn.database().list_collection_names()
        print_info("Collections", len(collections))
        print_success("Authenticated with a workload identity token")


if __name__ == "__main__":
    run_example(main)
