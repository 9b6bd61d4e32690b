"""Tests for Era, DateUnit and the NOT_DEFINED marker."""

from __future__ import annotations


class TestEra:
    """Tests for the Era enum."""

    def test_era_values(self) -> None:
        """Eras are numbered 0 and 1."""
        from ethiopic.units import Era

        assert Era.AMETE_ALEM == 0
        assert Era.AMETE_MIHRET == 1

    def test_is_before_epoch(self) -> None:
        """Only Amete Alem precedes year 1."""
        from ethiopic.units import Era

        assert Era.AMETE_ALEM.is_before_epoch is True
        assert Era.AMETE_MIHRET.is_before_epoch is False


class TestDateUnit:
    """Tests for the DateUnit enum."""

    def test_lookup_by_name(self) -> None:
        """Units can be looked up by their plural names."""
        from ethiopic.units import DateUnit

        assert DateUnit("months") is DateUnit.MONTHS
        assert DateUnit("weeks") is DateUnit.WEEKS

    def test_values_are_lowercase_names(self) -> None:
        """All DateUnit values are the lowercase member names."""
        from ethiopic.units import DateUnit

        for unit in DateUnit:
            assert unit.value == unit.name.lower()


class TestNotDefined:
    """Tests for the NOT_DEFINED marker."""

    def test_singleton(self) -> None:
        """NOT_DEFINED is the only member of NotDefined."""
        from ethiopic.units import NOT_DEFINED, NotDefined

        assert list(NotDefined) == [NOT_DEFINED]

    def test_falsy(self) -> None:
        """The marker is falsy."""
        from ethiopic.units import NOT_DEFINED

        assert not NOT_DEFINED

    def test_is_not_defined(self) -> None:
        """is_not_defined recognises only the marker."""
        from ethiopic.units import NOT_DEFINED, is_not_defined

        assert is_not_defined(NOT_DEFINED)
        assert not is_not_defined(0)
        assert not is_not_defined(None)

    def test_repr(self) -> None:
        """The marker has a short repr."""
        from ethiopic.units import NOT_DEFINED

        assert repr(NOT_DEFINED) == "NOT_DEFINED"
