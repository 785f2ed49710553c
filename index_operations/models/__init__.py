"""
Search index models: metadata entities and definition builders.
"""

from .entities import SearchIndexStatus, SearchIndexDescription
from .definitions import vector_search_definition, atlas_search_definition

__all__ = [
    'SearchIndexStatus',
    'SearchIndexDescription',
    'vector_search_definition',
    'atlas_search_definition'
]
