"""
Common Utilities for MongoDB Usage Examples

Provides helper functions for formatting output, generating test vectors
and running an example behind the fatal-error boundary shared by all of
them: any failure other than an empty result prints a diagnostic and ends
the process with a non-zero status.
"""

import sys
from typing import Any, Callable, Dict, List

import numpy as np
from bson import json_util
from pymongo.errors import PyMongoError

from mongo_ops_exceptions import MongoOpsError


def generate_random_vectors(count: int, dimension: int) -> List[List[float]]:
    """
    Generate random normalized vectors, e.g. as vector search query input.

    Args:
        count: Number of vectors to generate
        dimension: Dimension of each vector

    Returns:
        List of random vectors
    """
    vectors = np.random.rand(count, dimension).astype(np.float32)
    # Normalize vectors
    norms = np.linalg.norm(vectors, axis=1, keepdims=True)
    vectors = vectors / norms
    return vectors.tolist()


def print_section(title: str, width: int = 60):
    """
    Print a formatted section header.

    Args:
        title: Section title
        width: Width of the header line
    """
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width)


def print_step(step_num: int, description: str):
    """Print a step description."""
    print(f"\n[Step {step_num}] {description}")


def print_success(message: str):
    """Print a success message."""
    print(f"[SUCCESS] {message}")


def print_error(message: str):
    """Print an error message."""
    print(f"[ERROR] {message}", file=sys.stderr)


def print_warning(message: str):
    """Print a warning message."""
    print(f"[WARNING] {message}")


def print_note(message: str):
    """Print an informational note."""
    print(f"[NOTE] {message}")


def print_info(key: str, value: Any):
    """Print information in key-value format."""
    print(f"  • {key}: {value}")


def print_json(document: Dict[str, Any]):
    """Print a document as indented Extended JSON (ObjectIds, dates, ...)."""
    print(json_util.dumps(document, indent=4))


def print_documents(documents: List[Dict[str, Any]]):
    """Print documents one per line."""
    if not documents:
        print("No documents to display")
        return
    for document in documents:
        print(json_util.dumps(document))


def run_example(main: Callable[[], Any]) -> None:
    """
    Run an example's main function.

    Database and configuration failures are fatal: the diagnostic is
    printed and the process exits with status 1. Connections opened by
    `main` are scoped with `with` blocks, so they are already closed when
    the failure reaches this point.
    """
    try:
        main()
    except (MongoOpsError, PyMongoError) as e:
        print_error(f"{type(e).__name__}: {e}")
        sys.exit(1)
