from __future__ import annotations

import httpx
import pytest
from authclient.core.common.exceptions import (
    ApiStatusError,
    RefreshError,
    TransportError,
    UnauthorizedError,
)
from authclient.core.constants.status_catalog import StatusCatalog, status_name
from authclient.core.domain.failure import FailureRecord
from authclient.core.domain.request_descriptor import RequestDescriptor
from authclient.core.domain.response_envelope import (
    ResponseEnvelope,
    envelope_from_response,
    parse_envelope,
)


class TestStatusCatalog:
    @pytest.mark.parametrize(
        ("code", "name"),
        [
            (200, "SUCCESS"),
            (201, "CREATED"),
            (400, "BAD_REQUEST"),
            (401, "UNAUTHORIZED"),
            (403, "FORBIDDEN"),
            (404, "NOT_FOUND"),
            (409, "CONFLICT"),
            (422, "VALIDATION_ERROR"),
            (500, "INTERNAL_SERVER_ERROR"),
        ],
    )
    def test_catalog_names(self, code: int, name: str) -> None:
        assert status_name(code) == name
        assert StatusCatalog[name] == code

    @pytest.mark.parametrize("code", [None, 0, 204, 418, 999, -1])
    def test_unknown_codes_fall_back(self, code: int | None) -> None:
        assert status_name(code) == "Error"

    def test_custom_fallback(self) -> None:
        assert status_name(999, fallback="Unknown") == "Unknown"


class TestResponseEnvelope:
    def test_parse_full_envelope(self) -> None:
        envelope = parse_envelope({"code": 200, "message": "ok", "data": {"id": 1}})

        assert envelope == ResponseEnvelope(code=200, message="ok", data={"id": 1})

    def test_missing_fields_take_defaults(self) -> None:
        envelope = parse_envelope({"message": "only a message"})

        assert envelope is not None
        assert envelope.code == 0
        assert envelope.data is None

    def test_extra_fields_are_ignored(self) -> None:
        envelope = parse_envelope({"code": 201, "message": "", "trace": "abc"})

        assert envelope is not None
        assert envelope.code == 201

    @pytest.mark.parametrize("payload", [None, "text", [1, 2], {"code": "abc"}])
    def test_non_envelopes_are_rejected(self, payload: object) -> None:
        assert parse_envelope(payload) is None

    def test_envelope_from_response_tolerates_bad_bodies(self) -> None:
        request = httpx.Request("GET", "http://api.test/x")

        assert envelope_from_response(httpx.Response(500, request=request)) is None
        assert (
            envelope_from_response(
                httpx.Response(500, content=b"\xff\xfe", request=request)
            )
            is None
        )

    def test_repr_names_code(self) -> None:
        assert repr(ResponseEnvelope(code=404)) == '<ResponseEnvelope code="404">'


class TestRequestDescriptor:
    def test_method_is_normalized(self) -> None:
        assert RequestDescriptor(method="post", path="/x").method == "POST"

    def test_as_replay_copies_everything(self) -> None:
        original = RequestDescriptor(
            method="PUT",
            path="/items/1",
            params={"force": "1"},
            json={"name": "lamp"},
            headers={"x-trace": "t"},
        )

        replay = original.as_replay()

        assert replay.is_replay
        assert not original.is_replay
        assert replay.json == original.json
        assert replay.params == original.params
        assert replay.headers == original.headers
        assert replay.describe() == "PUT /items/1 (replay)"


class TestFailureRecord:
    def test_from_status_error(self) -> None:
        descriptor = RequestDescriptor(method="GET", path="/me")
        envelope = ResponseEnvelope(code=401, message="expired")
        error = UnauthorizedError(envelope=envelope, descriptor=descriptor)

        failure = FailureRecord.from_exception(error)

        assert failure.status_code == 401
        assert failure.envelope is envelope
        assert failure.descriptor is descriptor
        assert failure.has_envelope
        assert not failure.is_network_failure

    def test_from_transport_error(self) -> None:
        failure = FailureRecord.from_exception(TransportError())

        assert failure.is_network_failure
        assert failure.status_code is None
        assert not failure.has_envelope

    def test_from_foreign_exception(self) -> None:
        error = KeyError("missing")

        failure = FailureRecord.from_exception(error)

        assert failure.error is error
        assert failure.envelope is None
        assert not failure.is_network_failure


class TestExceptions:
    def test_status_error_to_dict_includes_envelope(self) -> None:
        error = ApiStatusError(
            "GET /x failed with status 409",
            status_code=409,
            envelope=ResponseEnvelope(code=409, message="Duplicate"),
            descriptor=RequestDescriptor(method="GET", path="/x"),
        )

        payload = error.to_dict()["error"]

        assert payload["type"] == "ApiStatusError"
        assert payload["status_code"] == 409
        assert payload["method"] == "GET"
        assert payload["path"] == "/x"
        assert payload["envelope"] == {"code": 409, "message": "Duplicate", "data": None}

    def test_unauthorized_always_401(self) -> None:
        assert UnauthorizedError(status_code=500).status_code == 401

    def test_refresh_error_inherits_cause_status(self) -> None:
        cause = ApiStatusError("nope", status_code=403)

        error = RefreshError(cause=cause)

        assert error.cause is cause
        assert error.status_code == 403
        assert RefreshError().status_code is None
