"""Tests for clicker.core.killswitch."""
from clicker.core.injector import Point
from clicker.core.killswitch import Killswitch

from conftest import FakeInjector


class TestHasDiverged:
    def test_same_position(self):
        ks = Killswitch(FakeInjector(start=(50, 50)))
        assert ks.has_diverged(Point(50, 50)) is False

    def test_within_tolerance(self):
        ks = Killswitch(FakeInjector(start=(52, 48)))
        assert ks.has_diverged(Point(50, 50)) is False

    def test_x_beyond_tolerance(self):
        ks = Killswitch(FakeInjector(start=(53, 50)))
        assert ks.has_diverged(Point(50, 50)) is True

    def test_y_beyond_tolerance(self):
        ks = Killswitch(FakeInjector(start=(50, 47)))
        assert ks.has_diverged(Point(50, 50)) is True

    def test_custom_tolerance(self):
        ks = Killswitch(FakeInjector(start=(60, 50)), tolerance=10)
        assert ks.tolerance == 10
        assert ks.has_diverged(Point(50, 50)) is False

    def test_unset_baseline(self):
        assert Killswitch(FakeInjector(start=(999, 999))).has_diverged(None) is False

    def test_last_seen_recorded(self):
        ks = Killswitch(FakeInjector(start=(7, 8)))
        ks.has_diverged(Point(0, 0))
        assert ks.last_seen == Point(7, 8)
