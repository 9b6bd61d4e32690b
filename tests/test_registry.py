"""Tests for calendar lookup by identifier."""

from __future__ import annotations

import logging

import pytest

from ethiopic import registry
from ethiopic.calendar import ETHIOPIC, EthiopicCalendar
from ethiopic.errors import UnknownCalendarError


@pytest.fixture
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give each test its own copy of the registry table."""
    monkeypatch.setattr(registry, "_CALENDARS", dict(registry._CALENDARS))


class TestGetCalendar:
    """Tests for get_calendar()."""

    def test_ethiopic_is_registered(self) -> None:
        """The ethiopic identifier resolves to the shared instance."""
        assert registry.get_calendar("ethiopic") is ETHIOPIC

    def test_unknown_identifier_raises(self) -> None:
        """Unknown identifiers raise UnknownCalendarError."""
        with pytest.raises(UnknownCalendarError, match="unknown calendar 'mayan'"):
            registry.get_calendar("mayan")

    def test_lookup_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Lookups emit a debug record."""
        with caplog.at_level(logging.DEBUG, logger="ethiopic.registry"):
            registry.get_calendar("ethiopic")
        assert "resolved calendar 'ethiopic'" in caplog.text

    def test_available_calendars(self) -> None:
        """The default registry lists the ethiopic calendar."""
        assert "ethiopic" in registry.available_calendars()


class TestRegisterCalendar:
    """Tests for register_calendar()."""

    def test_register_new_identifier(self, isolated_registry: None) -> None:
        """A calendar can be registered under a new identifier."""
        alias = EthiopicCalendar()
        registry.register_calendar("ethiopic-alias", alias)
        assert registry.get_calendar("ethiopic-alias") is alias
        assert registry.available_calendars() == ["ethiopic", "ethiopic-alias"]

    def test_duplicate_identifier_raises(self, isolated_registry: None) -> None:
        """Registering an identifier twice raises ValueError."""
        with pytest.raises(ValueError, match="already registered"):
            registry.register_calendar("ethiopic", EthiopicCalendar())

    def test_non_calendar_raises(self, isolated_registry: None) -> None:
        """Objects without the operation set are rejected."""
        with pytest.raises(TypeError, match="CalendarBehaviour"):
            registry.register_calendar("broken", object())  # type: ignore[arg-type]
