"""
Search Index Definitions

Builders for the two definition shapes accepted by createSearchIndexes:
Atlas Vector Search (`{"fields": [...]}`) and Atlas Search
(`{"mappings": {...}}`). Parameters are checked before anything is sent so
that a typo fails locally instead of as a failed build.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from index_operations.index_ops_exceptions import SearchIndexDefinitionError

VECTOR_SIMILARITIES = ("euclidean", "cosine", "dotProduct")
VECTOR_QUANTIZATIONS = ("none", "scalar", "binary")
MAX_VECTOR_DIMENSIONS = 8192


def vector_search_definition(
    path: str,
    num_dimensions: int,
    similarity: str = "dotProduct",
    quantization: Optional[str] = None,
    filter_paths: Iterable[str] = ()
) -> Dict[str, Any]:
    """
    Build an Atlas Vector Search index definition.

    Args:
        path: Field holding the embedding, e.g. "plot_embedding"
        num_dimensions: Length of the embedding vectors
        similarity: euclidean, cosine or dotProduct
        quantization: none, scalar or binary; omitted when None
        filter_paths: Fields that vector queries may pre-filter on

    Returns:
        Definition document

    Raises:
        SearchIndexDefinitionError: If a parameter is out of range
    """
    if not path:
        raise SearchIndexDefinitionError("Vector field path must not be empty", parameter="path")
    if not 1 <= num_dimensions <= MAX_VECTOR_DIMENSIONS:
        raise SearchIndexDefinitionError(
            f"numDimensions must be between 1 and {MAX_VECTOR_DIMENSIONS}, got {num_dimensions}",
            parameter="numDimensions"
        )
    if similarity not in VECTOR_SIMILARITIES:
        raise SearchIndexDefinitionError(
            f"similarity must be one of {VECTOR_SIMILARITIES}, got {similarity!r}", parameter="similarity"
        )
    if quantization is not None and quantization not in VECTOR_QUANTIZATIONS:
        raise SearchIndexDefinitionError(
            f"quantization must be one of {VECTOR_QUANTIZATIONS}, got {quantization!r}",
            parameter="quantization"
        )

    vector_field: Dict[str, Any] = {
        "type": "vector",
        "path": path,
        "numDimensions": num_dimensions,
        "similarity": similarity,
    }
    if quantization is not None:
        vector_field["quantization"] = quantization

    fields = [vector_field]
    fields.extend({"type": "filter", "path": filter_path} for filter_path in filter_paths)
    return {"fields": fields}


def atlas_search_definition(
    fields: Optional[Mapping[str, Union[str, Mapping[str, Any]]]] = None,
    dynamic: bool = False
) -> Dict[str, Any]:
    """
    Build an Atlas Search index definition.

    Args:
        fields: Field name -> type name ("string", "number", ...) or a full
                field mapping
        dynamic: Whether to index every field dynamically

    Example:
        >>> atlas_search_definition({"title": "string"})
        {'mappings': {'dynamic': False, 'fields': {'title': {'type': 'string'}}}}
    """
    if not dynamic and not fields:
        raise SearchIndexDefinitionError(
            "A static mapping needs at least one field", parameter="fields"
        )

    mapped: Dict[str, Any] = {}
    for name, spec in (fields or {}).items():
        mapped[name] = {"type": spec} if isinstance(spec, str) else dict(spec)

    mappings: Dict[str, Any] = {"dynamic": dynamic}
    if mapped:
        mappings["fields"] = mapped
    return {"mappings": mappings}
