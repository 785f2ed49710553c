from unittest import mock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import OperationFailure
from pymongo.results import DeleteResult, InsertManyResult, InsertOneResult, UpdateResult

from data_management_operations import (
    DocumentManager,
    RestaurantFilter,
    RestaurantRatingUpdate,
    TeaRating,
    run_command_cursor,
)
from mongo_ops_exceptions import CommandError, DeletionError, InsertionError, QueryError, UpdateError


@pytest.fixture
def collection():
    coll = mock.MagicMock(name="Collection")
    coll.full_name = "tea.ratings"
    return coll


@pytest.fixture
def manager(collection):
    return DocumentManager(collection)


def test_find_one_no_match_returns_none(manager, collection):
    collection.find_one.return_value = None

    assert manager.find_one({"title": "No Such Movie"}) is None


def test_find_one_passes_projection_and_sort(manager, collection):
    collection.find_one.return_value = {"title": "The Room", "imdb": {"rating": 3.5}}

    document = manager.find_one(
        {"title": "The Room"},
        projection={"_id": 0, "title": 1, "imdb": 1},
        sort={"imdb.rating": -1}
    )

    assert document["title"] == "The Room"
    collection.find_one.assert_called_once_with(
        {"title": "The Room"},
        projection={"_id": 0, "title": 1, "imdb": 1},
        sort=[("imdb.rating", -1)],
        session=None
    )


def test_find_returns_list(manager, collection):
    collection.find.return_value = iter([{"type": "Masala"}, {"type": "Assam"}])

    documents = manager.find(projection={"rating": 0}, sort=[("type", 1)])

    assert documents == [{"type": "Masala"}, {"type": "Assam"}]
    collection.find.assert_called_once_with({}, projection={"rating": 0}, sort=[("type", 1)],
                                            limit=0, session=None)


def test_find_empty_result_is_not_an_error(manager, collection):
    collection.find.return_value = iter([])
    assert manager.find({"type": "Rooibos"}) == []


def test_query_failure_is_wrapped(manager, collection):
    collection.find_one.side_effect = OperationFailure("unauthorized", code=13)

    with pytest.raises(QueryError) as excinfo:
        manager.find_one({"title": "The Room"})

    assert excinfo.value.operation == "find_one"
    assert isinstance(excinfo.value.__cause__, OperationFailure)


def test_insert_many_serializes_models(manager, collection):
    ids = [ObjectId(), ObjectId()]
    collection.insert_many.return_value = InsertManyResult(ids, acknowledged=True)

    summary = manager.insert_many([TeaRating(type="Masala", rating=10), {"type": "Assam"}])

    collection.insert_many.assert_called_once_with(
        [{"type": "Masala", "rating": 10}, {"type": "Assam"}], ordered=True, session=None
    )
    assert summary.operation == "insert_many"
    assert summary.inserted_count == 2
    assert summary.inserted_ids == ids


def test_insert_one_summary(manager, collection):
    inserted_id = ObjectId()
    collection.insert_one.return_value = InsertOneResult(inserted_id, acknowledged=True)

    summary = manager.insert_one({"item": "grapefruit"})

    assert summary.inserted_ids == [inserted_id]


def test_insert_failure_is_wrapped(manager, collection):
    collection.insert_one.side_effect = OperationFailure("duplicate key", code=11000)

    with pytest.raises(InsertionError):
        manager.insert_one({"_id": 1})


def test_update_many_with_models(manager, collection):
    collection.update_many.return_value = UpdateResult(
        {"n": 3, "nModified": 2}, acknowledged=True
    )

    summary = manager.update_many(
        RestaurantFilter(cuisine="Pizza", borough="Brooklyn"),
        {"$set": RestaurantRatingUpdate(average_rating=4.5)}
    )

    collection.update_many.assert_called_once_with(
        {"cuisine": "Pizza", "borough": "Brooklyn"},
        {"$set": {"avg_rating": 4.5}},
        upsert=False,
        session=None
    )
    assert summary.matched_count == 3
    assert summary.modified_count == 2


def test_update_failure_is_wrapped(manager, collection):
    collection.replace_one.side_effect = OperationFailure("bad replacement")

    with pytest.raises(UpdateError) as excinfo:
        manager.replace_one({"title": "Shrek"}, {"title": "Shrek"})

    assert excinfo.value.operation == "replace_one"


def test_delete_one_counts(manager, collection):
    collection.delete_one.return_value = DeleteResult({"n": 1}, acknowledged=True)

    assert manager.delete_one({"name": "New Corner"}).deleted_count == 1


def test_delete_nothing_is_zero(manager, collection):
    collection.delete_many.return_value = DeleteResult({"n": 0}, acknowledged=True)

    assert manager.delete_many({"runtime": {"$gt": 800}}).deleted_count == 0


def test_delete_one_decrements_count(manager, collection):
    stored = [{"name": "New Corner"}, {"name": "Old Corner"}]

    def delete_one(filter, session=None):
        matches = [document for document in stored if document.items() >= filter.items()]
        if matches:
            stored.remove(matches[0])
        return DeleteResult({"n": len(matches[:1])}, acknowledged=True)

    collection.delete_one.side_effect = delete_one
    collection.count_documents.side_effect = lambda filter, session=None: len(stored)
    before = manager.count_documents()

    summary = manager.delete_one({"name": "New Corner"})

    assert summary.deleted_count == 1
    assert manager.count_documents() == before - 1
    assert manager.delete_one({"name": "New Corner"}).deleted_count == 0
    assert manager.count_documents() == before - 1


def test_delete_failure_is_wrapped(manager, collection):
    collection.delete_one.side_effect = OperationFailure("not primary")

    with pytest.raises(DeletionError):
        manager.delete_one({"name": "New Corner"})


def test_unacknowledged_write_has_zero_counts(manager, collection):
    collection.delete_one.return_value = DeleteResult(None, acknowledged=False)

    summary = manager.delete_one({"name": "New Corner"})

    assert summary.acknowledged is False
    assert summary.deleted_count == 0


def test_find_one_and_update_returns_after(manager, collection):
    collection.find_one_and_update.return_value = {"type": "Oolong", "rating": 9}

    result = manager.find_one_and_update({"type": "Oolong"}, {"$set": {"rating": 9}}, return_after=True)

    assert result == {"type": "Oolong", "rating": 9}
    _, kwargs = collection.find_one_and_update.call_args
    assert kwargs["return_document"] is ReturnDocument.AFTER


def test_find_one_and_replace_returns_before_by_default(manager, collection):
    manager.find_one_and_replace({"type": "English Breakfast"}, TeaRating(type="Ceylon", rating=6))

    args, kwargs = collection.find_one_and_replace.call_args
    assert args == ({"type": "English Breakfast"}, {"type": "Ceylon", "rating": 6})
    assert kwargs["return_document"] is ReturnDocument.BEFORE


def test_find_one_and_delete_no_match(manager, collection):
    collection.find_one_and_delete.return_value = None

    assert manager.find_one_and_delete({"type": "Assam"}) is None


def test_aggregate_serializes_pipeline(manager, collection):
    collection.aggregate.return_value = iter([{"_id": "Masala", "average": 8.5}])

    results = manager.aggregate([{"$match": {"rating": {"$gt": 8}}}, {"$limit": 5}])

    assert results == [{"_id": "Masala", "average": 8.5}]
    collection.aggregate.assert_called_once_with(
        [{"$match": {"rating": {"$gt": 8}}}, {"$limit": 5}], session=None
    )


def test_counts(manager, collection):
    collection.estimated_document_count.return_value = 21349
    collection.count_documents.return_value = 185

    assert manager.estimated_document_count() == 21349
    assert manager.count_documents({"countries": "China"}) == 185
    collection.count_documents.assert_called_once_with({"countries": "China"}, session=None)


def test_run_command_cursor():
    database = mock.MagicMock(name="Database")
    database.cursor_command.return_value = iter([{"name": "flowers"}, {"name": "trees"}])

    results = run_command_cursor(database, {"listCollections": 1, "filter": {"info.readOnly": False}})

    assert [r["name"] for r in results] == ["flowers", "trees"]
    database.cursor_command.assert_called_once_with(
        {"listCollections": 1, "filter": {"info.readOnly": False}}
    )


def test_run_command_cursor_failure():
    database = mock.MagicMock(name="Database")
    database.cursor_command.side_effect = OperationFailure("no such command")

    with pytest.raises(CommandError) as excinfo:
        run_command_cursor(database, {"listCollections": 1})

    assert excinfo.value.operation == "listCollections"
