"""
Data Management Operations Module

Provides the document operations demonstrated by the usage examples:
- Point and bulk lookups with projection, sort and limit
- Single and bulk inserts, updates, replacements and deletes
- Exact and estimated counts
- Compound find-and-modify operations
- Aggregation pipelines and cursor-returning database commands
- Pydantic document models with stored field aliases

Typical usage:

    from connection_management import ConnectionManager
    from data_management_operations import DocumentManager

    with ConnectionManager() as conn:
        movies = DocumentManager(conn.collection("movies", database="sample_mflix"))
        movie = movies.find_one({"title": "Back to the Future"})
        if movie is None:
            print("No document was found")
"""

# Core manager (primary interface)
from .core.manager import DocumentManager, run_command_cursor

# Data models
from .models.documents import (
    DocumentModel,
    BlogPost,
    Restaurant,
    RestaurantFilter,
    RestaurantRatingUpdate,
    Course,
    TeaRating,
    Haiku,
    Book,
    to_document
)
from .models.entities import WriteSummary

__all__ = [
    # Primary interface
    'DocumentManager',
    'run_command_cursor',

    # Models
    'DocumentModel',
    'BlogPost',
    'Restaurant',
    'RestaurantFilter',
    'RestaurantRatingUpdate',
    'Course',
    'TeaRating',
    'Haiku',
    'Book',
    'to_document',
    'WriteSummary'
]
