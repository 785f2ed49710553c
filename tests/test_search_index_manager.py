from unittest import mock

import pytest
from pymongo.errors import OperationFailure

from config import SearchIndexType
from config.settings import SearchIndexSettings
from index_operations import (
    IndexOperationConfig,
    SearchIndexBuildError,
    SearchIndexDefinitionError,
    SearchIndexManager,
    SearchIndexNotFoundError,
    SearchIndexOperationError,
    SearchIndexStatus,
    SearchIndexTimeoutError,
    atlas_search_definition,
    vector_search_definition,
)
from mongo_ops_exceptions import OperationTimeoutError


def index_listing(queryable, status="BUILDING", name="vector_index"):
    return [{"name": name, "id": "65f1", "type": "vectorSearch", "status": status,
             "queryable": queryable, "latestDefinition": {"fields": []}}]


@pytest.fixture
def collection():
    return mock.MagicMock(name="Collection")


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def manager(collection, sleeps):
    return SearchIndexManager(collection, config=IndexOperationConfig(poll_interval=5.0), sleep=sleeps.append)


def test_create_search_index(manager, collection):
    collection.create_search_index.return_value = "vector_index"
    definition = vector_search_definition("plot_embedding", 1536, quantization="scalar")

    name = manager.create_search_index("vector_index", definition, index_type=SearchIndexType.VECTOR_SEARCH)

    assert name == "vector_index"
    model = collection.create_search_index.call_args[0][0]
    assert model.document == {"name": "vector_index", "type": "vectorSearch", "definition": definition}


def test_create_failure_is_wrapped(manager, collection):
    collection.create_search_index.side_effect = OperationFailure("Atlas only")

    with pytest.raises(SearchIndexOperationError) as excinfo:
        manager.create_search_index("vector_index", {"fields": []}, index_type="vectorSearch")

    assert excinfo.value.index_name == "vector_index"


def test_not_ready_until_queryable(manager, collection, sleeps):
    collection.list_search_indexes.side_effect = [
        index_listing(False, "PENDING"),
        index_listing(False, "BUILDING"),
        # A READY status alone does not make the index usable
        index_listing(False, "READY"),
        index_listing(True, "READY"),
    ]

    description = manager.wait_until_queryable("vector_index")

    assert description.is_ready
    assert description.status is SearchIndexStatus.READY
    assert collection.list_search_indexes.call_count == 4
    assert sleeps == [5.0, 5.0, 5.0]


def test_ready_on_first_check_does_not_sleep(manager, collection, sleeps):
    collection.list_search_indexes.return_value = index_listing(True, "READY")

    manager.wait_until_queryable("vector_index")

    assert sleeps == []


def test_failed_build(manager, collection):
    collection.list_search_indexes.return_value = index_listing(False, "FAILED")

    with pytest.raises(SearchIndexBuildError):
        manager.wait_until_queryable("vector_index")


def test_missing_index(manager, collection):
    collection.list_search_indexes.return_value = []

    with pytest.raises(SearchIndexNotFoundError):
        manager.wait_until_queryable("vector_index")


def test_other_index_names_are_ignored(manager, collection):
    collection.list_search_indexes.return_value = index_listing(True, "READY", name="other_index")

    with pytest.raises(SearchIndexNotFoundError):
        manager.wait_until_queryable("vector_index")


def test_deadline(manager, collection):
    collection.list_search_indexes.return_value = index_listing(False, "BUILDING")

    with pytest.raises(SearchIndexTimeoutError) as excinfo:
        manager.wait_until_queryable("vector_index", timeout=0)

    assert excinfo.value.timeout_seconds == 0
    assert isinstance(excinfo.value, OperationTimeoutError)
    assert excinfo.value.attempts == 1


def test_poll_interval_override(manager, collection, sleeps):
    collection.list_search_indexes.side_effect = [index_listing(False), index_listing(True, "READY")]

    manager.wait_until_queryable("vector_index", poll_interval=0.5, timeout=None)

    assert sleeps == [0.5]


def test_unknown_status_is_tolerated(manager, collection):
    collection.list_search_indexes.return_value = index_listing(True, "SOMETHING_NEW")

    assert manager.describe_search_index("vector_index").status is SearchIndexStatus.UNKNOWN


def test_update_and_drop(manager, collection):
    definition = vector_search_definition("plot_embedding", 1536)

    manager.update_search_index("vector_index", definition)
    manager.drop_search_index("vector_index")

    collection.update_search_index.assert_called_once_with("vector_index", definition)
    collection.drop_search_index.assert_called_once_with("vector_index")


def test_drop_failure_is_wrapped(manager, collection):
    collection.drop_search_index.side_effect = OperationFailure("index not found")

    with pytest.raises(SearchIndexOperationError):
        manager.drop_search_index("vector_index")


def test_vector_search_definition():
    assert vector_search_definition("plot_embedding", 1536, quantization="scalar",
                                    filter_paths=["year"]) == {
        "fields": [
            {"type": "vector", "path": "plot_embedding", "numDimensions": 1536,
             "similarity": "dotProduct", "quantization": "scalar"},
            {"type": "filter", "path": "year"},
        ]
    }


@pytest.mark.parametrize("kwargs, parameter", [
    ({"path": "", "num_dimensions": 1536}, "path"),
    ({"path": "plot_embedding", "num_dimensions": 0}, "numDimensions"),
    ({"path": "plot_embedding", "num_dimensions": 9000}, "numDimensions"),
    ({"path": "plot_embedding", "num_dimensions": 1536, "similarity": "manhattan"}, "similarity"),
    ({"path": "plot_embedding", "num_dimensions": 1536, "quantization": "int4"}, "quantization"),
])
def test_vector_search_definition_rejects(kwargs, parameter):
    with pytest.raises(SearchIndexDefinitionError) as excinfo:
        vector_search_definition(**kwargs)

    assert excinfo.value.parameter == parameter


def test_atlas_search_definition():
    assert atlas_search_definition({"title": "string", "year": {"type": "number"}}) == {
        "mappings": {"dynamic": False, "fields": {"title": {"type": "string"}, "year": {"type": "number"}}}
    }
    assert atlas_search_definition(dynamic=True) == {"mappings": {"dynamic": True}}


def test_static_atlas_search_definition_needs_fields():
    with pytest.raises(SearchIndexDefinitionError):
        atlas_search_definition()


def test_index_operation_config():
    assert IndexOperationConfig(poll_interval=-1).poll_interval == 5.0
    assert IndexOperationConfig(build_timeout=-1).build_timeout is None

    config = IndexOperationConfig.from_dict({"poll_interval": 2.0, "unknown": True})
    assert config.to_dict() == {"poll_interval": 2.0, "build_timeout": 300.0}

    settings = SearchIndexSettings(poll_interval=1.0, build_timeout=None)
    assert IndexOperationConfig.from_settings(settings).build_timeout is None
