"""
TLS Connection Example

Demonstrates connecting over TLS with an explicit CA bundle and a client
certificate. The certificate paths are read from the environment:

    MONGODB_TLS_CA_FILE=/path/to/ca.pem
    MONGODB_TLS_CERTIFICATE_KEY_FILE=/path/to/client.pem

When they are not set, the system CA store is used and no client
certificate is presented.
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
print_note = example_utils.print_note
print_success = example_utils.print_success
run_example = example_utils.run_example


def main():
    print_section("TLS Connection")

    settings = load_settings()
    settings.tls.enabled = True

    print_info("CA file", settings.tls.ca_file or "system CA store")
    print_info("Client certificate", settings.tls.certificate_key_file or "none")
    if settings.tls.allow_invalid_certificates:
        print_note("Server certificate validation is disabled")

    with ConnectionManager(settings) as conn:
        if conn.check_server_status():
            print_success("Connected to MongoDB over TLS")


if __name__ == "__main__":
    run_example(main)
