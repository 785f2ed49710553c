"""
Document Models

Pydantic models for the documents used across the usage examples. Field
aliases give the stored field names (for example `_id` and `avg_rating`),
and unset optional fields are left out of the stored document, so a model
only writes the fields it actually carries.

Typical usage:
    from data_management_operations import BlogPost, to_document

    post = BlogPost(title="Annuals vs. Perennials?", author="Sam Lee", word_count=682)
    collection.insert_one(to_document(post))
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


class DocumentModel(BaseModel):
    """Base class for models stored as documents."""
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    def to_document(self) -> Dict[str, Any]:
        """Serialize by alias, omitting fields that are None."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        """Build a model from a stored document; unknown fields are ignored."""
        return cls.model_validate(document)


class BlogPost(DocumentModel):
    """A post in sample_training.blogPosts."""
    id: Optional[ObjectId] = Field(None, alias="_id")
    title: Optional[str] = None
    author: Optional[str] = None
    word_count: Optional[int] = None
    tags: Optional[List[str]] = None


class Restaurant(DocumentModel):
    """A restaurant in sample_restaurants.restaurants."""
    id: Optional[ObjectId] = Field(None, alias="_id")
    name: Optional[str] = None
    cuisine: Optional[str] = None
    borough: Optional[str] = None
    average_rating: Optional[float] = Field(None, alias="avg_rating")


class RestaurantFilter(DocumentModel):
    """Matches restaurants by cuisine and borough."""
    cuisine: Optional[str] = None
    borough: Optional[str] = None


class RestaurantRatingUpdate(DocumentModel):
    """Fields written by the rating update examples."""
    average_rating: float = Field(..., alias="avg_rating")


class Course(DocumentModel):
    """A course in db.courses."""
    title: str
    enrollment: int


class TeaRating(DocumentModel):
    """A rating in tea.ratings."""
    type: str
    rating: Optional[int] = None
    visits: Optional[int] = None


class Haiku(DocumentModel):
    """A haiku in insertDB.haikus."""
    title: str
    text: str


class Book(DocumentModel):
    """A book in myDB.myColl."""
    title: str
    author: str


def to_document(value: Any) -> Any:
    """
    Convert models to documents, recursing into dicts and lists.

    Plain documents pass through unchanged, so filters, updates and
    pipelines may mix literal operators with models:

        {"$set": RestaurantRatingUpdate(average_rating=4.5)}
    """
    if isinstance(value, DocumentModel):
        return value.to_document()
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, dict):
        return {key: to_document(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_document(item) for item in value]
    return value
