"""
Unit tests for encoding profiles.
"""

import pytest
from pydantic import ValidationError

from calendar_ics.encoding.profiles import (
    BASIC,
    DEFAULT_PROFILE,
    EXTENDED,
    PROFILES,
    TAGGED,
    EncodingProfile,
    PropertySpec,
    get_profile,
)
from calendar_ics.models.calendar import Calendar
from calendar_ics.utils.exceptions import ConfigurationError


class TestBuiltinProfiles:
    """Tests for the built-in profile table."""

    def test_legacy_order(self):
        """Test basic and tagged share the legacy property order."""
        expected = ["PRODID", "CALSCALE", "VERSION", "X-WR-CALNAME", "X-WR-CALDESC", "X-WR-TIMEZONE"]

        assert [spec.name for spec in BASIC.calendar_properties] == expected
        assert [spec.name for spec in TAGGED.calendar_properties] == expected

    def test_extended_order(self):
        """Test the extended profile declares the full property set in order."""
        assert [spec.name for spec in EXTENDED.calendar_properties] == [
            "VERSION", "PRODID", "URL", "NAME", "X-WR-CALNAME", "DESCRIPTION",
            "X-WR-CALDESC", "TIMEZONE-ID", "X-WR-TIMEZONE", "REFRESH-INTERVAL",
            "X-PUBLISHED-TTL", "COLOR", "CALSCALE", "METHOD",
        ]

    def test_refresh_interval_is_duration(self):
        """Test REFRESH-INTERVAL carries VALUE=DURATION."""
        spec = next(s for s in EXTENDED.calendar_properties if s.name == "REFRESH-INTERVAL")

        assert spec.parameters == (("VALUE", "DURATION"),)

    def test_value_type_tags(self):
        """Test only the basic profile omits VALUE tags."""
        assert BASIC.value_type_tag is False
        assert TAGGED.value_type_tag is True
        assert EXTENDED.value_type_tag is True

    def test_attributes_exist_on_calendar(self):
        """Test every declared attribute is a Calendar field."""
        for profile in PROFILES.values():
            for spec in profile.calendar_properties:
                assert spec.attribute in Calendar.model_fields

    def test_profiles_are_frozen(self):
        """Test profiles cannot be modified in place."""
        with pytest.raises(ValidationError):
            BASIC.value_type_tag = True


class TestGetProfile:
    """Tests for get_profile."""

    def test_default(self):
        """Test None resolves to the extended profile."""
        assert get_profile() is DEFAULT_PROFILE is EXTENDED

    def test_by_name(self):
        """Test lookups are case-insensitive."""
        assert get_profile("basic") is BASIC
        assert get_profile("Tagged") is TAGGED

    def test_custom_profile_passthrough(self):
        """Test a caller-built profile is returned unchanged."""
        custom = EncodingProfile(
            name="custom",
            calendar_properties=(PropertySpec(name="METHOD", attribute="method"),),
            tzid_property=False,
        )

        assert get_profile(custom) is custom

    def test_unknown_name(self):
        """Test unknown names raise ConfigurationError listing known ones."""
        with pytest.raises(ConfigurationError, match="basic, extended, tagged"):
            get_profile("outlook")
