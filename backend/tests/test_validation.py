"""Test boundary validation."""
import pytest

from hive_engine.records import HiveEvent
from hive_engine.validation import (
    HiveValidationError, validate_user, validate_event, validate_population,
)


class TestValidation:
    """Test record invariants."""

    def test_valid_demo_population(self, demo_users, demo_events):
        validate_population(demo_users, demo_events)

    def test_unknown_interest(self, make_user):
        with pytest.raises(HiveValidationError, match="knitting"):
            validate_user(make_user("a", interests=["knitting"]))

    @pytest.mark.parametrize("strength", [-0.1, 1.01])
    def test_strength_out_of_range(self, make_user, strength):
        with pytest.raises(HiveValidationError):
            validate_user(make_user("a", strength=strength))

    def test_hive_level_out_of_range(self, make_user):
        with pytest.raises(HiveValidationError):
            validate_user(make_user("a", hive_level=6))

    def test_unknown_event_category(self):
        with pytest.raises(HiveValidationError):
            validate_event(HiveEvent(id="e", title="Knit", category="knitting"))

    def test_duplicate_event_ids(self):
        event = HiveEvent(id="e", title="Jam", category="music")
        with pytest.raises(HiveValidationError, match="Duplicate"):
            validate_population([], [event, event])

    def test_is_value_error(self):
        assert issubclass(HiveValidationError, ValueError)
