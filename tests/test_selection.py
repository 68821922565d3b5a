import random
import warnings

import pytest

from asset_conf.errors import (
    InsufficientRandomPoolWarning,
    NoAssetsSelectedError,
    UnknownAssetError,
)
from asset_conf.selection import parse_asset_list, plan_selection


def test_explicit_plus_random_fill():
    out = plan_selection(["A", "B", "C"], explicit=["A"], random_count=2)
    assert len(out) == 3
    assert out[0] == "A"
    assert set(out[1:]) == {"B", "C"}


def test_unknown_explicit_asset():
    with pytest.raises(UnknownAssetError) as exc:
        plan_selection(["A"], explicit=["Z"])
    assert exc.value.symbol == "Z"


def test_fail_fast_on_first_unknown():
    with pytest.raises(UnknownAssetError) as exc:
        plan_selection(["A", "B"], explicit=["A", "X", "Y"])
    assert exc.value.symbol == "X"


def test_duplicate_explicit_fails_on_second_occurrence():
    with pytest.raises(UnknownAssetError) as exc:
        plan_selection(["A", "B"], explicit=["A", "B", "A"])
    assert exc.value.symbol == "A"


def test_empty_catalog_nothing_requested():
    with pytest.raises(NoAssetsSelectedError):
        plan_selection([])


def test_zero_random_count_selects_nothing():
    with pytest.raises(NoAssetsSelectedError):
        plan_selection(["A", "B"], explicit=None, random_count=0)


def test_insufficient_random_pool_warns_and_uses_all():
    with pytest.warns(InsufficientRandomPoolWarning) as rec:
        out = plan_selection(["A", "B"], explicit=None, random_count=5)
    assert sorted(out) == ["A", "B"]
    w = rec[0].message
    assert (w.requested, w.available) == (5, 2)


def test_insufficient_pool_after_explicit():
    with pytest.warns(InsufficientRandomPoolWarning):
        out = plan_selection(["A", "B", "C"], explicit=["C"], random_count=3)
    assert out[0] == "C"
    assert sorted(out[1:]) == ["A", "B"]


def test_exact_pool_size_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        out = plan_selection(["A", "B", "C"], random_count=3)
    assert sorted(out) == ["A", "B", "C"]


def test_random_only_is_unique_subset():
    catalog = [f"S{i}" for i in range(50)]
    out = plan_selection(catalog, random_count=20)
    assert len(out) == 20
    assert len(set(out)) == 20
    assert set(out) <= set(catalog)


def test_seeded_rng_is_reproducible():
    catalog = [f"S{i}" for i in range(50)]
    a = plan_selection(catalog, random_count=5, rng=random.Random(7))
    b = plan_selection(catalog, random_count=5, rng=random.Random(7))
    assert a == b


def test_explicit_order_preserved():
    assert plan_selection(["A", "B", "C"], explicit=["C", "A"]) == ["C", "A"]


def test_case_insensitive_lookup_returns_catalog_spelling():
    out = plan_selection(["BTCUSD", "ETHUSD"], explicit=["btcusd"])
    assert out == ["BTCUSD"]


def test_repeated_catalog_entries_never_duplicate_random_fill():
    out = plan_selection(["A", "A", "B"], random_count=3)
    assert sorted(out) == ["A", "B"]


def test_repeated_catalog_entries_still_fail_second_explicit_request():
    with pytest.raises(UnknownAssetError) as exc:
        plan_selection(["A", "A"], explicit=["A", "A"])
    assert exc.value.symbol == "A"


def test_repeated_catalog_entries_counted_once_for_warning():
    with pytest.warns(InsufficientRandomPoolWarning) as rec:
        plan_selection(["A", "B", "A", "B"], random_count=3)
    assert rec[0].message.available == 2


def test_catalog_is_not_mutated():
    catalog = ["A", "B", "C"]
    plan_selection(catalog, explicit=["A"], random_count=2)
    assert catalog == ["A", "B", "C"]


@pytest.mark.parametrize("raw,expected", [
    (None, []),
    ("", []),
    ("BTCUSD", ["BTCUSD"]),
    (" BTCUSD , ETHUSD ,", ["BTCUSD", "ETHUSD"]),
])
def test_parse_asset_list(raw, expected):
    assert parse_asset_list(raw) == expected
