"""Unit tests for DiscountPolicy bands and the resolver."""

import random

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.discount_policy import DiscountPolicy
from storefront.domain.model.value_objects import DiscountRate
from storefront.domain.service.discount_resolver import (
    DiscountPolicyResolver,
    resolve_discount_rate,
    select_policy,
)
from tests.fakes import FakeDiscountPolicyRepository


def _policy(
    pid: str,
    min_q: int,
    max_q: int | None,
    rate: str,
    group: str = "X",
) -> DiscountPolicy:
    return DiscountPolicy(
        id=pid, group=group, min_quantity=min_q, max_quantity=max_q,
        rate=DiscountRate.of(rate),
    )


TIERS = [
    _policy("t1", 5, 9, "0.10"),
    _policy("t2", 10, 19, "0.15"),
    _policy("t3", 20, None, "0.20"),
]


class TestDiscountPolicy:

    def test_covers_inclusive_bounds(self):
        band = _policy("p", 5, 9, "0.1")
        assert not band.covers(4)
        assert band.covers(5)
        assert band.covers(9)
        assert not band.covers(10)

    def test_unbounded_maximum(self):
        band = _policy("p", 20, None, "0.2")
        assert band.covers(20)
        assert band.covers(10_000)

    def test_maximum_below_minimum_rejected(self):
        with pytest.raises(ValidationError, match="below minimum"):
            _policy("p", 10, 5, "0.1")

    def test_negative_minimum_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _policy("p", -1, 5, "0.1")

    def test_blank_group_rejected(self):
        with pytest.raises(ValidationError, match="group is required"):
            _policy("p", 1, 5, "0.1", group=" ")

    def test_band_label(self):
        assert _policy("p", 5, 9, "0.1").band_label == "5-9"
        assert _policy("p", 20, None, "0.1").band_label == "20+"


class TestResolveDiscountRate:

    @pytest.mark.parametrize(
        "quantity, expected",
        [(1, "0"), (4, "0"), (5, "0.10"), (9, "0.10"), (10, "0.15"),
         (19, "0.15"), (20, "0.20"), (500, "0.20")],
    )
    def test_tiers(self, quantity, expected):
        assert resolve_discount_rate(TIERS, "X", quantity) == DiscountRate.of(expected)

    def test_other_group_policies_ignored(self):
        policies = [_policy("y", 1, None, "0.5", group="Y")]
        assert resolve_discount_rate(policies, "X", 10) == DiscountRate.none()

    def test_no_policies_means_zero(self):
        assert resolve_discount_rate([], "X", 10).is_zero

    def test_overlap_prefers_highest_qualifying_minimum(self):
        policies = [
            _policy("wide", 1, None, "0.05"),
            _policy("narrow", 10, 20, "0.03"),
        ]
        assert resolve_discount_rate(policies, "X", 15) == DiscountRate.of("0.03")
        assert resolve_discount_rate(policies, "X", 25) == DiscountRate.of("0.05")

    def test_equal_minimum_prefers_higher_rate_then_id(self):
        policies = [
            _policy("b", 5, 9, "0.10"),
            _policy("a", 5, 9, "0.10"),
            _policy("c", 5, None, "0.07"),
        ]
        chosen = select_policy(policies, "X", 6)
        assert chosen is not None
        assert chosen.id == "a"

    def test_independent_of_storage_order(self):
        policies = [
            _policy("wide", 1, None, "0.05"),
            _policy("mid", 5, 30, "0.08"),
            _policy("top", 10, 20, "0.12"),
            _policy("dup", 10, 15, "0.12"),
        ]
        expected = [resolve_discount_rate(policies, "X", q) for q in range(0, 40)]
        rng = random.Random(7)
        for _ in range(10):
            shuffled = policies[:]
            rng.shuffle(shuffled)
            assert [resolve_discount_rate(shuffled, "X", q) for q in range(0, 40)] == expected

    def test_rates_never_decrease_across_tiers(self):
        rates = [resolve_discount_rate(TIERS, "X", q) for q in range(0, 60)]
        assert all(a <= b for a, b in zip(rates, rates[1:]))


class TestDiscountPolicyResolver:

    def test_reads_the_repository_on_every_call(self):
        repo = FakeDiscountPolicyRepository([_policy("t1", 5, 9, "0.10")])
        resolver = DiscountPolicyResolver(repo)
        assert resolver.resolve("X", 5) == DiscountRate.of("0.10")

        repo.policies = [_policy("t1", 5, 9, "0.25")]
        assert resolver.resolve("X", 5) == DiscountRate.of("0.25")
        assert repo.queries == 2
