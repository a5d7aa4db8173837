"""Unit tests for the field rules and the request models built on them."""

import pytest
from pydantic import TypeAdapter, ValidationError

from bencana_api.core.exceptions import violations
from bencana_api.core.validation import parse_integer
from bencana_api.domain.schemas.auth import LoginRequest, RegisterRequest
from bencana_api.domain.schemas.bencana import BencanaCreate, BencanaId
from conftest import MERAPI


def errors_of(model, data):
    with pytest.raises(ValidationError) as excinfo:
        model.model_validate(data)
    return violations(excinfo.value.errors())


def test_valid_report_passes_through_unchanged():
    assert BencanaCreate.model_validate(MERAPI).model_dump() == MERAPI


@pytest.mark.parametrize("value", [None, "", "   "])
def test_required_rejects_empty_values(value):
    assert errors_of(BencanaCreate, {**MERAPI, "laporan": value}) == [
        {"field": "laporan", "message": "Laporan is required"}
    ]


def test_required_rejects_absent_field():
    data = {k: v for k, v in MERAPI.items() if k != "nama_gunung"}
    assert errors_of(BencanaCreate, data) == [
        {"field": "nama_gunung", "message": "Nama Gunung is required"}
    ]


@pytest.mark.parametrize("value", ["Normal", "Waspada", "Siaga", "Awas"])
def test_status_accepts_every_member(value):
    assert BencanaCreate.model_validate({**MERAPI, "status_aktivitas": value}).status_aktivitas == value


@pytest.mark.parametrize("value", ["siaga", "SIAGA", "Danger", "", None, 1])
def test_status_is_case_sensitive_and_strict(value):
    assert errors_of(BencanaCreate, {**MERAPI, "status_aktivitas": value}) == [
        {"field": "status_aktivitas", "message": "Invalid status aktivitas"}
    ]


def test_violations_keep_field_order():
    errors = errors_of(BencanaCreate, {"status_aktivitas": "nope"})
    assert [e["field"] for e in errors] == [
        "nama_gunung", "status_aktivitas", "rekomendasi", "laporan"
    ]


def test_validation_does_not_mutate_input():
    data = {"nama_gunung": "  "}
    errors_of(BencanaCreate, data)
    assert data == {"nama_gunung": "  "}


@pytest.mark.parametrize("value,expected", [("1", 1), ("42", 42), ("-7", -7), ("+3", 3), (10, 10)])
def test_parse_integer_accepts_integers(value, expected):
    assert parse_integer(value) == expected


@pytest.mark.parametrize("value", ["abc", "1.5", "", "1e3", "²", None, True, 2.0])
def test_parse_integer_rejects_non_integers(value):
    assert parse_integer(value) is None


def test_report_id_rule_message():
    with pytest.raises(ValidationError) as excinfo:
        TypeAdapter(BencanaId).validate_python("satu")
    assert violations(excinfo.value.errors()) == [{"field": "body", "message": "ID must be an integer"}]


def test_report_id_keeps_large_integers():
    assert TypeAdapter(BencanaId).validate_python("99999999999999999999999") == 99999999999999999999999


def test_register_lists_each_missing_field():
    assert errors_of(RegisterRequest, {"email": "x@example.com", "password": " "}) == [
        {"field": "name", "message": "name is required"},
        {"field": "password", "message": "password is required"},
    ]


def test_login_requires_both_fields():
    assert [e["field"] for e in errors_of(LoginRequest, {})] == ["email", "password"]


def test_violations_drop_request_location_prefix():
    errors = [
        {"loc": ("path", "id"), "msg": "ID must be an integer", "type": "is_integer"},
        {"loc": ("body", 4), "msg": "JSON decode error", "type": "json_invalid"},
        {"loc": ("query", "page"), "msg": "Input should be greater than or equal to 1"},
    ]
    assert violations(errors) == [
        {"field": "id", "message": "ID must be an integer"},
        {"field": "body", "message": "JSON decode error"},
        {"field": "page", "message": "Input should be greater than or equal to 1"},
    ]
