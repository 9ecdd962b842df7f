from __future__ import annotations

import logging

import pytest

from airsync.domain.reconciliation import RemoteIndex, find_match
from airsync.domain.schema import EntitySchema, FieldSpec
from tests.helpers.remote_store import make_remote

PAIR = EntitySchema.declare(
    "pair",
    key=("letter", "digit"),
    fields=(FieldSpec("letter"), FieldSpec("digit"), FieldSpec("label")),
)


def test_find_match_returns_exact_key_match() -> None:
    listing = [
        make_remote(PAIR, "recA", letter="A", digit="1"),
        make_remote(PAIR, "recB", letter="B", digit="2"),
    ]

    match = find_match({"letter": "B", "digit": "2"}, listing, schema=PAIR)

    assert match is not None
    assert match.id == "recB"


def test_find_match_requires_every_key_field() -> None:
    listing = [
        make_remote(PAIR, "recA", letter="A", digit="1"),
        make_remote(PAIR, "recB", letter="B", digit="2"),
    ]

    assert find_match({"letter": "A", "digit": "2"}, listing, schema=PAIR) is None


def test_find_match_ignores_non_key_fields() -> None:
    listing = [make_remote(PAIR, "recA", letter="A", digit="1", label="remote")]

    match = find_match({"letter": "A", "digit": "1", "label": "derived"}, listing, schema=PAIR)

    assert match is not None
    assert match.id == "recA"


def test_index_keeps_first_duplicate_and_reports_the_rest(
    caplog: pytest.LogCaptureFixture,
) -> None:
    listing = [
        make_remote(PAIR, "recFirst", letter="A", digit="1"),
        make_remote(PAIR, "recSecond", letter="A", digit="1"),
        make_remote(PAIR, "recOther", letter="B", digit="2"),
    ]

    with caplog.at_level(logging.WARNING):
        index = RemoteIndex.build(listing, schema=PAIR)

    match = index.find({"letter": "A", "digit": "1"})
    assert match is not None
    assert match.id == "recFirst"
    assert [record.id for record in index.duplicates] == ["recSecond"]
    assert len(index) == 2
    assert "recSecond" in caplog.text


def test_index_and_linear_scan_agree_on_duplicates() -> None:
    listing = [
        make_remote(PAIR, "recFirst", letter="A", digit="1"),
        make_remote(PAIR, "recSecond", letter="A", digit="1"),
    ]
    derived = {"letter": "A", "digit": "1"}

    indexed = RemoteIndex.build(listing, schema=PAIR).find(derived)
    scanned = find_match(derived, listing, schema=PAIR)

    assert indexed is scanned
