"""Test the fixed contract tables."""
import pytest

from hive_engine.constants import (
    INTEREST_CATEGORIES, INTEREST_CATEGORY_SET, INTEREST_COLORS, GROUP_NAMES,
    CONNECTION_TYPES, EVENT_EVENT, USER_USER, USER_EVENT,
    LOW_AFFINITY, MEDIUM_AFFINITY, HIGH_AFFINITY, MIN_GROUP_SIZE, MAX_GROUP_SIZE,
)


class TestContractTables:
    """Test category vocabulary, palette and group names."""

    def test_ten_categories(self):
        assert len(INTEREST_CATEGORIES) == 10
        assert INTEREST_CATEGORY_SET == set(INTEREST_CATEGORIES)

    def test_tables_keyed_by_categories(self):
        assert list(INTEREST_COLORS) == list(INTEREST_CATEGORIES)
        assert list(GROUP_NAMES) == list(INTEREST_CATEGORIES)

    def test_tables_read_only(self):
        with pytest.raises(TypeError):
            INTEREST_COLORS["tech"] = "#000000"
        with pytest.raises(TypeError):
            GROUP_NAMES["knitting"] = "Yarn Hive"

    def test_connection_types(self):
        assert CONNECTION_TYPES == (USER_USER, USER_EVENT, EVENT_EVENT)

    def test_threshold_ordering(self):
        assert 0 < LOW_AFFINITY < MEDIUM_AFFINITY < HIGH_AFFINITY < 1
        assert MIN_GROUP_SIZE < MAX_GROUP_SIZE
