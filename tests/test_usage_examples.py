import importlib.util
import logging
from pathlib import Path
from unittest import mock

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure
from pymongo.results import DeleteResult, InsertManyResult, InsertOneResult

from monitoring import BufferedLogSink

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "usage_examples"


def load_example(relative_path):
    path = EXAMPLES_DIR / relative_path
    spec = importlib.util.spec_from_file_location(f"example_{path.stem}", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def env(clean_env):
    clean_env.setenv("MONGODB_URI", "mongodb://localhost:27017")
    return clean_env


@pytest.fixture
def client():
    return mock.MagicMock(name="MongoClient")


@pytest.fixture
def mongo_client_class(env, client):
    with mock.patch("connection_management.connection_manager.MongoClient", return_value=client) as factory:
        yield factory


@pytest.fixture
def collection(client):
    # client[db][coll] resolves to the same child mock for every name
    return client.__getitem__.return_value.__getitem__.return_value


@pytest.mark.parametrize("relative_path", sorted(
    str(path.relative_to(EXAMPLES_DIR)) for path in EXAMPLES_DIR.glob("0*/*.py")
))
def test_examples_import_without_running(relative_path):
    module = load_example(relative_path)
    assert callable(module.main)


def test_quick_start_no_match(mongo_client_class, client, collection, capsys):
    collection.find_one.return_value = None

    load_example("01_connection/basic_connection.py").main()

    assert "No document was found with the title Back to the Future" in capsys.readouterr().out
    mongo_client_class.assert_called_once_with("mongodb://localhost:27017", serverSelectionTimeoutMS=20000)
    client.close.assert_called_once_with()


def test_quick_start_prints_document(mongo_client_class, client, collection, capsys):
    collection.find_one.return_value = {"title": "Back to the Future", "year": 1985}

    load_example("01_connection/basic_connection.py").main()

    out = capsys.readouterr().out
    assert '"title": "Back to the Future"' in out
    client.close.assert_called_once_with()


def test_missing_uri_is_fatal(clean_env, capsys):
    example = load_example("01_connection/basic_connection.py")

    with mock.patch("connection_management.connection_manager.MongoClient") as factory:
        with pytest.raises(SystemExit) as excinfo:
            example.run_example(example.main)

    assert excinfo.value.code == 1
    assert "MONGODB_URI" in capsys.readouterr().err
    factory.assert_not_called()


def test_operation_failure_is_fatal_and_releases_once(mongo_client_class, client, collection, capsys):
    collection.find_one.side_effect = OperationFailure("not authorized", code=13)
    example = load_example("02_crud/find_one.py")

    with pytest.raises(SystemExit) as excinfo:
        example.run_example(example.main)

    assert excinfo.value.code == 1
    assert "QueryError" in capsys.readouterr().err
    client.close.assert_called_once_with()


def test_find_one_no_match_is_silent(mongo_client_class, client, collection, capsys):
    collection.find_one.return_value = None

    load_example("02_crud/find_one.py").main()

    _, kwargs = collection.find_one.call_args
    assert kwargs["projection"] == {"_id": 0, "title": 1, "imdb": 1}
    assert kwargs["sort"] == [("imdb.rating", -1)]
    assert "{" not in capsys.readouterr().out


def test_delete_one_reports_count(mongo_client_class, client, collection, capsys):
    collection.delete_one.side_effect = [
        DeleteResult({"n": 1}, acknowledged=True),
        DeleteResult({"n": 0}, acknowledged=True),
    ]

    load_example("02_crud/delete_one.py").main()

    assert collection.delete_one.call_args_list == [
        mock.call({"name": "New Corner"}, session=None),
        mock.call({"title": "Twilight"}, session=None),
    ]
    client.__getitem__.assert_any_call("sample_restaurants")
    client.__getitem__.assert_any_call("sample_mflix")
    out = capsys.readouterr().out
    assert "1 document(s) deleted." in out
    assert "Number of documents deleted: 0" in out


def test_update_one_uses_stored_field_name(mongo_client_class, collection):
    load_example("02_crud/update_one.py").main()

    args, _ = collection.update_one.call_args
    assert args == ({"_id": ObjectId("5eb3d668b31de5d588f4292b")}, {"$set": {"avg_rating": 4.4}})


def test_session_transaction_commits(mongo_client_class, client, collection, capsys):
    session = client.start_session.return_value
    inserted_id = ObjectId()
    collection.insert_one.return_value = InsertOneResult(inserted_id, acknowledged=True)

    load_example("04_transactions/session_transaction.py").main()

    collection.insert_one.assert_called_once_with({"title": "Sula", "author": "Toni Morrison"}, session=session)
    session.commit_transaction.assert_called_once_with()
    session.end_session.assert_called_once_with()
    assert str(inserted_id) in capsys.readouterr().out
    client.close.assert_called_once_with()


def test_transaction_failure_aborts_and_is_fatal(mongo_client_class, client, collection, capsys):
    session = client.start_session.return_value
    collection.insert_many.side_effect = OperationFailure("WriteConflict", code=112)
    example = load_example("04_transactions/transaction.py")

    with pytest.raises(SystemExit):
        example.run_example(example.main)

    session.abort_transaction.assert_called_once_with()
    session.commit_transaction.assert_not_called()
    assert "TransactionAbortedError" in capsys.readouterr().err
    client.close.assert_called_once_with()


def test_custom_logging_detaches_its_sink(mongo_client_class, collection):
    load_example("05_logging/custom_logging.py").main()

    collection.insert_one.assert_called_once_with({"item": "grapefruit"}, session=None)
    handlers = logging.getLogger("pymongo").handlers
    assert not any(isinstance(handler, BufferedLogSink) for handler in handlers)


def test_vector_search_index_waits_then_queries(mongo_client_class, client, collection, capsys):
    collection.create_search_index.return_value = "vector_index"
    collection.list_search_indexes.return_value = [
        {"name": "vector_index", "status": "READY", "queryable": True}
    ]
    collection.aggregate.return_value = iter([{"title": "Back to the Future", "score": 0.91}])

    load_example("06_search_indexes/vector_search_index.py").main()

    out = capsys.readouterr().out
    assert "New search index named vector_index is building." in out
    assert "vector_index is ready for querying." in out
    pipeline = collection.aggregate.call_args[0][0]
    assert pipeline[0]["$vectorSearch"]["index"] == "vector_index"
    assert len(pipeline[0]["$vectorSearch"]["queryVector"]) == 1536
    client.close.assert_called_once_with()


def test_projection_sends_exclusion_and_inclusion(mongo_client_class, collection, capsys):
    collection.insert_many.return_value = InsertManyResult([ObjectId() for _ in range(5)], acknowledged=True)
    collection.find.side_effect = [
        [{"_id": ObjectId(), "type": "Masala"}],
        [{"type": "Masala", "rating": 10}],
    ]
    collection.aggregate.return_value = iter([{"type": "Assam", "rating": 5}])

    load_example("02_crud/projection.py").main()

    collection.drop.assert_called_once_with()
    inserted = collection.insert_many.call_args[0][0]
    assert [document["type"] for document in inserted] == [
        "Masala", "Assam", "Oolong", "Earl Grey", "English Breakfast"
    ]
    projections = [kwargs["projection"] for _, kwargs in collection.find.call_args_list]
    assert projections == [{"rating": 0}, {"type": 1, "rating": 1, "_id": 0}]
    pipeline = collection.aggregate.call_args[0][0]
    assert pipeline == [{"$project": {"type": 1, "rating": 1, "_id": 0}}]
    out = capsys.readouterr().out
    assert '"rating": 10' in out
    assert '"type": "Assam"' in out


def test_aggregation_sends_both_pipelines(mongo_client_class, collection, capsys):
    collection.insert_many.return_value = InsertManyResult([ObjectId() for _ in range(19)], acknowledged=True)
    collection.aggregate.side_effect = [
        iter([{"_id": "Masala", "average": 8.5, "count": 11}]),
        iter([{"type": "Masala", "visits": 24}]),
    ]

    load_example("03_aggregation/aggregation.py").main()

    assert len(collection.insert_many.call_args[0][0]) == 19
    pipelines = [args[0] for args, _ in collection.aggregate.call_args_list]
    assert pipelines[0] == [
        {"$group": {"_id": "$type", "average": {"$avg": "$rating"}, "count": {"$sum": 1}}}
    ]
    assert [next(iter(stage)) for stage in pipelines[1]] == ["$match", "$unset", "$sort", "$limit"]
    assert pipelines[1][0] == {"$match": {"rating": {"$gt": 8}}}
    assert pipelines[1][3] == {"$limit": 5}
    out = capsys.readouterr().out
    assert "Number of documents inserted: 19" in out
    assert "Masala has an average rating of 8.5" in out
    assert "Masala Count: 11" in out
