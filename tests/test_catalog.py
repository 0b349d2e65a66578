"""Unit tests for the fixed catalogs and status classification."""

import pytest

from hotel_inventory.models import (
    ALLOWED_OCCUPANCIES,
    ConfigurationStatus,
    Occupancy,
    RoomType,
    classify_configuration,
    configuration_percentage,
)


class TestCatalogAliases:
    """Tests for Spanish code aliases and labels."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("ESTANDAR", RoomType.STANDARD),
            ("estándar", RoomType.STANDARD),
            ("STANDARD", RoomType.STANDARD),
            ("junior", RoomType.JUNIOR),
        ],
    )
    def test_room_type_aliases(self, code, expected):
        assert RoomType(code) is expected

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("SENCILLA", Occupancy.SINGLE),
            ("DOBLE", Occupancy.DOUBLE),
            ("CUADRUPLE", Occupancy.QUADRUPLE),
            ("quadruple", Occupancy.QUADRUPLE),
        ],
    )
    def test_occupancy_aliases(self, code, expected):
        assert Occupancy(code) is expected

    def test_unknown_code_raises(self):
        with pytest.raises(ValueError):
            RoomType("PENTHOUSE")
        with pytest.raises(ValueError):
            Occupancy(4)

    def test_labels(self):
        assert RoomType.STANDARD.label == "Estándar"
        assert Occupancy.QUADRUPLE.label == "Cuádruple"
        assert Occupancy.SINGLE.label == "Sencilla"

    def test_every_room_type_has_allowed_occupancies(self):
        assert set(ALLOWED_OCCUPANCIES) == set(RoomType)
        assert all(ALLOWED_OCCUPANCIES[room_type] for room_type in RoomType)


class TestConfigurationStatus:
    """Tests for progress classification."""

    def test_complete(self):
        assert classify_configuration(10, 10) is ConfigurationStatus.COMPLETE
        assert ConfigurationStatus.COMPLETE.label == "Completo"

    @pytest.mark.parametrize("configured", [5, 7, 9])
    def test_in_progress(self, configured):
        assert classify_configuration(configured, 10) is ConfigurationStatus.IN_PROGRESS

    @pytest.mark.parametrize("configured", [0, 1, 4])
    def test_pending(self, configured):
        assert classify_configuration(configured, 10) is ConfigurationStatus.PENDING
        assert ConfigurationStatus.PENDING.label == "Pendiente"

    def test_percentage(self):
        assert configuration_percentage(0, 10) == 0
        assert configuration_percentage(1, 3) == pytest.approx(33.333, rel=1e-3)
        assert configuration_percentage(42, 42) == 100

    def test_almost_complete_is_in_progress(self):
        assert classify_configuration(999, 1000) is ConfigurationStatus.IN_PROGRESS
