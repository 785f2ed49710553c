"""
Data management models: document models and write results.
"""

from .documents import (
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
from .entities import WriteSummary

__all__ = [
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
