"""Tests for requestbuilder.ops.query — query request, builder and response."""

import pytest

from requestbuilder.ops import OperationRequest, QueryOperation, Status
from requestbuilder.ops.query import QueryRequest, QueryRequestBuilder, QueryResponse
from sample_entities import User


class TestQueryRequestBuilder:
    @pytest.mark.parametrize(
        "id_,parent_id,reference_id,context_id",
        [
            ("abc-123", "parent-456", "ref-1", "tenant-a"),
            ("  padded  ", "", None, "ctx"),
            (None, None, None, None),
            ("", "", "", ""),
        ],
    )
    def test_fields_round_trip_unchanged(self, id_, parent_id, reference_id, context_id):
        request = (
            OperationRequest.query(User)
            .id(id_)
            .parent_id(parent_id)
            .reference_id(reference_id)
            .context_id(context_id)
            .build()
        )
        assert request.id == id_
        assert request.parent_id == parent_id
        assert request.reference_id == reference_id
        assert request.context_id == context_id
        assert request.entity_type is User

    def test_with_identifiers(self):
        request = OperationRequest.query(User).with_identifiers("u-1", "org-9").build()
        assert request.id == "u-1"
        assert request.parent_id == "org-9"
        assert request.reference_id is None
        assert request.context_id is None

    def test_with_identifiers_overrides_earlier_values(self):
        request = (
            OperationRequest.query(User)
            .id("old")
            .parent_id("old-parent")
            .with_identifiers("new", None)
            .build()
        )
        assert request.id == "new"
        assert request.parent_id is None

    def test_all_setters_chain(self):
        builder = OperationRequest.query(User)
        assert builder.id("1") is builder
        assert builder.parent_id("2") is builder
        assert builder.reference_id("3") is builder
        assert builder.context_id("4") is builder
        assert builder.with_identifiers("5", "6") is builder

    def test_repeated_builds_are_equal(self):
        builder = OperationRequest.query(User).id("1").context_id("tenant")
        assert builder.build() == builder.build()

    def test_to_dict(self):
        d = OperationRequest.query(User).id("1").context_id("").build().to_dict()
        assert d == {
            "operation": "query",
            "entity_type": "sample_entities.User",
            "id": "1",
            "context_id": "",
        }


class TestQueryRequestPredicates:
    @pytest.mark.parametrize("value,expected", [(None, False), ("", False), (" ", True), ("x", True)])
    def test_has_id(self, value, expected):
        assert QueryRequest(User, id=value).has_id() is expected

    @pytest.mark.parametrize("value,expected", [(None, False), ("", False), ("tenant", True)])
    def test_has_context_id(self, value, expected):
        assert QueryRequest(User, context_id=value).has_context_id() is expected

    def test_has_parent_and_reference_id(self):
        request = QueryRequest(User, parent_id="p", reference_id="")
        assert request.has_parent_id() is True
        assert request.has_reference_id() is False


class TestQueryResponse:
    def test_none_results_become_empty_list(self):
        response = QueryResponse(Status.SUCCESS, results=None)
        assert response.results == []
        assert response.is_empty() is True
        assert response.size() == 0

    def test_default_results_empty(self):
        response = QueryResponse()
        assert response.results == []
        assert response.status is None

    def test_preserves_order_and_size(self):
        users = [User(name=n) for n in ("c", "a", "b")]
        response = QueryResponse(Status.SUCCESS, results=users)
        assert response.size() == 3
        assert not response.is_empty()
        assert [u.name for u in response.results] == ["c", "a", "b"]

    def test_accepts_any_iterable(self):
        response = QueryResponse.ok(User(name=n) for n in ("x", "y"))
        assert isinstance(response.results, list)
        assert [u.name for u in response] == ["x", "y"]

    def test_results_are_second_positional_argument(self):
        users = [User(name="a"), User(name="b")]
        response = QueryResponse(Status.SUCCESS, users)
        assert response.size() == 2
        assert response.results == users
        assert response.message is None

    def test_message_and_metadata_positional_after_results(self, sample_metadata):
        response = QueryResponse(Status.SUCCESS, [], "no rows", sample_metadata)
        assert response.message == "no rows"
        assert response.metadata is sample_metadata

    def test_assigning_none_results_keeps_empty_list(self):
        response = QueryResponse.ok([User(name="a")])
        response.results = None
        assert response.results == []
        assert response.size() == 0
        assert response.is_empty()

    def test_assigned_iterable_becomes_list(self):
        response = QueryResponse(Status.SUCCESS)
        response.results = (User(name=n) for n in ("x", "y"))
        assert [u.name for u in response.results] == ["x", "y"]
        assert response.size() == 2

    def test_equality_by_fields(self):
        assert QueryResponse(Status.SUCCESS, [1]) == QueryResponse.ok([1])

    def test_fail_has_empty_results(self):
        response = QueryResponse.fail("backend unavailable")
        assert response.is_failure()
        assert response.is_empty()
        assert response.message == "backend unavailable"

    def test_results_never_none_per_instance(self):
        a, b = QueryResponse(), QueryResponse()
        a.results.append(User(name="ada"))
        assert b.results == []

    def test_to_dict(self):
        user = User(name="ada")
        d = QueryResponse.ok([user]).to_dict()
        assert d == {"status": "SUCCESS", "success": True, "results": [user], "count": 1}


class TestQueryOperationNamespace:
    def test_members(self):
        assert QueryOperation.Request is QueryRequest
        assert QueryOperation.Builder is QueryRequestBuilder
        assert QueryOperation.Response is QueryResponse
