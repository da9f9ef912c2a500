"""Tests for salon/context.py: current salon selection."""

from unittest.mock import patch
from salon.context import Salon, SalonContext


class TestSalonContext:
    def test_empty(self):
        ctx = SalonContext()
        assert ctx.current is None
        assert ctx.scope_id is None

    def test_select_and_clear(self):
        ctx = SalonContext()
        ctx.select(Salon(id="s1", name="Glow"))
        assert ctx.scope_id == "s1"
        ctx.clear()
        assert ctx.scope_id is None

    def test_from_settings(self):
        with patch("salon.context.settings") as mock_settings:
            mock_settings.default_salon_id = "s7"
            assert SalonContext.from_settings().scope_id == "s7"
            mock_settings.default_salon_id = ""
            assert SalonContext.from_settings().current is None
