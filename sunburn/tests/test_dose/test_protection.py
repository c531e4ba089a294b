"""Tests for sweat-driven SPF decay."""

import pytest

from sunburn.config.defaults import SWEAT_LEVELS
from sunburn.dose.protection import effective_spf
from sunburn.models.profile import SweatLevel

LOW = SWEAT_LEVELS[SweatLevel.LOW]
MEDIUM = SWEAT_LEVELS[SweatLevel.MEDIUM]
HIGH = SWEAT_LEVELS[SweatLevel.HIGH]


class TestEffectiveSpf:
    def test_no_sweat_never_decays(self):
        assert effective_spf(30.0, LOW, 0.0) == 30.0
        assert effective_spf(30.0, LOW, 48.0) == 30.0

    def test_no_sunscreen_never_decays(self):
        assert effective_spf(1.0, HIGH, 5.0) == 1.0

    def test_before_decay_start(self):
        assert effective_spf(30.0, HIGH, 0.5) == 30.0
        assert effective_spf(30.0, HIGH, 1.0) == 30.0

    def test_linear_decay_midpoint(self):
        """HIGH decays over hours 1..7; at hour 4 SPF is halfway from 30 to 1."""
        assert effective_spf(30.0, HIGH, 4.0) == pytest.approx(15.5)

    def test_medium_midpoint(self):
        """MEDIUM decays over hours 2..14."""
        assert effective_spf(30.0, MEDIUM, 8.0) == pytest.approx(15.5)

    def test_after_decay_pinned_to_one(self):
        assert effective_spf(50.0, HIGH, 7.0) == 1.0
        assert effective_spf(50.0, HIGH, 20.0) == 1.0

    def test_never_below_one(self):
        for tenth in range(0, 200):
            assert effective_spf(15.0, HIGH, tenth / 10) >= 1.0
        assert effective_spf(0.2, LOW, 1.0) == 1.0

    def test_non_increasing_over_time(self):
        values = [effective_spf(50.0, MEDIUM, h / 4) for h in range(0, 80)]
        assert all(b <= a for a, b in zip(values, values[1:]))
