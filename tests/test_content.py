"""Ephemeral content resolver stories: one-time reads, missing keys, store failures."""

from __future__ import annotations

import logging

import pytest

from brevo_relay.adapters.memory import InMemoryStore
from brevo_relay.application.content import content_reference, fetch_once, resolve_content
from brevo_relay.domain.enums import LookupStatus
from brevo_relay.domain.errors import StoreError


class _ExplodingStore:
    """Store whose every call raises something other than StoreError."""

    def get(self, key: str) -> object | None:
        raise ConnectionResetError("socket closed")

    def delete(self, key: str) -> None:
        raise AssertionError("delete must not run after a failed get")

    def put(self, key: str, value: str, *, ttl_seconds: int | None = None) -> None:
        raise ConnectionResetError("socket closed")


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("value", "expected"),
    [({"key": "k1"}, "k1"), ({"key": 42}, "42"), ({"key": ""}, None), ({}, None), ("k1", None), (None, None)],
)
def test_content_reference_extracts_truthy_keys(value: object, expected: str | None) -> None:
    assert content_reference(value) == expected


@pytest.mark.os_agnostic
def test_found_value_is_returned_and_key_deleted(memory_store: InMemoryStore) -> None:
    memory_store.put("k1", "<p>body</p>")

    lookup = fetch_once(memory_store, "k1")

    assert lookup.status is LookupStatus.FOUND
    assert lookup.found is True
    assert lookup.value == "<p>body</p>"
    assert "k1" not in memory_store.values


@pytest.mark.os_agnostic
def test_second_read_of_the_same_key_finds_nothing(memory_store: InMemoryStore) -> None:
    memory_store.put("k1", "once")

    first = resolve_content(memory_store, "k1")
    second = resolve_content(memory_store, "k1")

    assert (first, second) == ("once", "")


@pytest.mark.os_agnostic
def test_missing_key_is_reported_as_missing(memory_store: InMemoryStore) -> None:
    lookup = fetch_once(memory_store, "absent")

    assert lookup.status is LookupStatus.MISSING
    assert lookup.value is None


@pytest.mark.os_agnostic
def test_store_error_on_get_is_reported_as_failed(memory_store: InMemoryStore) -> None:
    memory_store.put("k1", "body")
    memory_store.fail_on_get = True

    lookup = fetch_once(memory_store, "k1")

    assert lookup.status is LookupStatus.FAILED
    assert "simulated outage" in (lookup.detail or "")
    assert memory_store.values == {"k1": "body"}


@pytest.mark.os_agnostic
def test_unexpected_store_exception_is_contained() -> None:
    assert resolve_content(_ExplodingStore(), "k1") == ""


@pytest.mark.os_agnostic
def test_delete_failure_keeps_the_retrieved_value(
    memory_store: InMemoryStore,
    caplog: pytest.LogCaptureFixture,
) -> None:
    memory_store.put("k1", "body")
    memory_store.fail_on_delete = True

    with caplog.at_level(logging.WARNING, logger="brevo_relay.application.content"):
        value = resolve_content(memory_store, "k1")

    assert value == "body"
    assert any("delete failed" in record.getMessage() for record in caplog.records)


@pytest.mark.os_agnostic
def test_store_error_is_the_in_memory_failure_type(memory_store: InMemoryStore) -> None:
    memory_store.fail_on_get = True

    with pytest.raises(StoreError):
        memory_store.get("k1")
