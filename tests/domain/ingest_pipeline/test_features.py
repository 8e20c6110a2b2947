from __future__ import annotations

from pragmaticon.domain.ingest_pipeline import IssueReporter, RegistrySet
from pragmaticon.domain.ingest_pipeline.features import (
    decode_feature,
    decode_feature_list,
    split_features,
)
from pragmaticon.domain.model import IssueKind
from tests.support.corpus import FakeRegistryStore


def test_split_features_drops_empty_segments() -> None:
    assert split_features("|а||б|") == ["а", "б"]
    assert split_features("") == []


def test_same_value_in_different_fields_gets_distinct_ids() -> None:
    store = FakeRegistryStore()
    registries = RegistrySet.from_store(store)
    reporter = IssueReporter()

    gest = decode_feature_list("gest", "кивок", registries, reporter)
    organ = decode_feature_list("organ", "кивок", registries, reporter)
    again = decode_feature_list("gest", "кивок", registries, reporter)

    assert gest == again == [1]
    assert organ == [2]
    assert store.calls["features"] == 2


def test_feature_list_keeps_order_and_repeats() -> None:
    registries = RegistrySet.from_store(FakeRegistryStore())

    ids = decode_feature_list("act1", "б|а|б", registries, IssueReporter())

    assert ids == [1, 2, 1]


def test_empty_optional_list_is_silent() -> None:
    reporter = IssueReporter()

    ids = decode_feature_list("gest", "", RegistrySet.from_store(FakeRegistryStore()), reporter)

    assert ids == []
    assert reporter.issues == []


def test_empty_mandatory_list_is_reported() -> None:
    reporter = IssueReporter(row=7)

    ids = decode_feature_list(
        "actclass", "|", RegistrySet.from_store(FakeRegistryStore()), reporter, mandatory=True
    )

    assert ids == []
    [issue] = reporter.of_kind(IssueKind.DATA_QUALITY)
    assert issue.field == "actclass"
    assert issue.row == 7


def test_single_feature_strips_and_skips_blank() -> None:
    store = FakeRegistryStore()
    registries = RegistrySet.from_store(store)

    assert decode_feature("style", "   ", registries) is None
    assert decode_feature("style", " груб. ", registries) == 1
    assert store.rows["features"] == [("style", "груб.")]
