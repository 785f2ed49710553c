"""
Third-Party Logger Example

Routes the driver's command records to loguru, formatted as

    [LEVEL]: YYYY-MM-DD HH:mm:ss - message <commandName>

and runs an insert, a delete and an update to produce some records.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from connection_management import ConnectionManager
from data_management_operations import DocumentManager
from monitoring import configure_driver_logging, configure_loguru, reset_driver_logging
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
    print_section("Third-Party Logger")

    settings = load_settings()
    settings.logging.level = "DEBUG"
    settings.logging.sink = LogSink.LOGURU
    settings.logging.component_levels = {
        "command": "DEBUG",
        "connection": "INFO",
        "serverSelection": "INFO",
        "topology": "INFO",
    }

    configure_loguru(settings.logging)
    configure_driver_logging(settings.logging)
    try:
        with ConnectionManager(settings) as conn:
            coll = DocumentManager(conn.collection("testColl", database="testDB"))
            coll.insert_many([{"item": "starfruit"}, {"item": "kiwi"}, {"item": "cantaloupe"}])
            coll.delete_one({"item": "kiwi"})
            coll.update_one({"item": "cantaloupe"}, {"$set": {"qty": 3}})
    finally:
        reset_driver_logging()


if __name__ == "__main__":
    run_example(main)
