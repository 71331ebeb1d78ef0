"""Tests for requestbuilder.ops.delete — delete request, builder and response."""

import dataclasses

import pytest

from requestbuilder.ops import DeleteOperation, OperationRequest, Status
from requestbuilder.ops.delete import DeleteRequest, DeleteRequestBuilder, DeleteResponse
from sample_entities import Comment


class TestDeleteRequestBuilder:
    def test_id_and_parent_id(self):
        request = OperationRequest.delete(Comment).id("123").parent_id("parent-456").build()
        assert isinstance(request, DeleteRequest)
        assert request.id == "123"
        assert request.parent_id == "parent-456"
        assert request.entity_type is Comment

    def test_omitted_fields_are_absent(self):
        request = OperationRequest.delete(Comment).id("123").build()
        assert request.parent_id is None

    def test_empty_builder(self):
        request = OperationRequest.delete(Comment).build()
        assert request.id is None
        assert request.parent_id is None

    def test_setters_return_same_builder(self):
        builder = OperationRequest.delete(Comment)
        assert builder.id("1") is builder
        assert builder.parent_id("2") is builder

    def test_last_value_wins(self):
        request = OperationRequest.delete(Comment).id("1").id("2").build()
        assert request.id == "2"

    def test_repeated_builds_are_equal(self):
        builder = OperationRequest.delete(Comment).id("123").parent_id("p")
        assert builder.build() == builder.build()

    def test_request_is_frozen(self):
        request = OperationRequest.delete(Comment).id("123").build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.id = "456"

    def test_to_dict_omits_absent_fields(self):
        d = OperationRequest.delete(Comment).id("123").build().to_dict()
        assert d == {
            "operation": "delete",
            "entity_type": "sample_entities.Comment",
            "id": "123",
        }


class TestDeleteResponse:
    def test_failure_with_message(self):
        response = DeleteResponse(Status.FAILURE, "Entity not found")
        assert response.is_failure()
        assert not response.is_success()
        assert response.message == "Entity not found"

    def test_success(self):
        response = DeleteResponse(Status.SUCCESS)
        assert response.is_success()
        assert response.message is None

    def test_status_from_string(self):
        assert DeleteResponse("SUCCESS").status is Status.SUCCESS


class TestDeleteOperationNamespace:
    def test_members(self):
        assert DeleteOperation.Request is DeleteRequest
        assert DeleteOperation.Builder is DeleteRequestBuilder
        assert DeleteOperation.Response is DeleteResponse
