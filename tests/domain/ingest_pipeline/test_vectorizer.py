from __future__ import annotations

import pytest

from pragmaticon.domain.ingest_pipeline import RegistrySet
from pragmaticon.domain.ingest_pipeline.vectorizer import split_parts, tokenize, vectorize_unit
from tests.support.corpus import FakeRegistryStore


@pytest.mark.parametrize(
    ("part", "expected"),
    [
        ("ну и ну", ["ну", "и", "ну"]),
        ("пере-дать слово", ["пере", "-дать", "слово"]),
        ("  ну   вот ", ["ну", "вот"]),
        ("кто-то-нибудь", ["кто", "-то", "-нибудь"]),
        ("", []),
        ("   ", []),
    ],
)
def test_tokenize(part: str, expected: list[str]) -> None:
    assert tokenize(part) == expected


def test_split_parts_keeps_empty_parts() -> None:
    assert split_parts("а||б") == ["а", "", "б"]


def test_vectorize_unit_shares_tokens_and_expressions() -> None:
    store = FakeRegistryStore()
    registries = RegistrySet.from_store(store)

    vector = vectorize_unit("ну и ну|ну", registries)

    assert vector.token_ids == ((1, 2, 1), (1,))
    assert vector.expression_ids == (1, 2)
    assert vector.primary_expression_id == 1
    assert vector.phrase_id == 1
    assert store.rows["tokens"] == ["ну", "и"]
    assert store.rows["exprs"] == [(1, 2, 1), (1,)]
    assert store.rows["phrases"] == [(1, 2)]


def test_vectorize_unit_is_order_sensitive() -> None:
    registries = RegistrySet.from_store(FakeRegistryStore())

    forward = vectorize_unit("да|нет", registries)
    backward = vectorize_unit("нет|да", registries)
    again = vectorize_unit("да|нет", registries)

    assert forward.phrase_id != backward.phrase_id
    assert again.phrase_id == forward.phrase_id
    assert len(registries.phrases) == 2
    assert len(registries.expressions) == 2


def test_vectorize_unit_registers_empty_expression_for_empty_part() -> None:
    store = FakeRegistryStore()
    registries = RegistrySet.from_store(store)

    vector = vectorize_unit("ну|", registries)

    assert vector.token_ids == ((1,), ())
    assert store.rows["exprs"] == [(1,), ()]
    assert vector.phrase_id is not None
