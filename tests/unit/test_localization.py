"""Unit tests for localization helpers."""

from mtr_directions.core.models import MtrLineInfo
from mtr_directions.utils.localization import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    get_localized_name,
    validate_mtr_direction,
)


class TestLocalization:
    """Test language selection."""

    def setup_method(self):
        """Set up test fixtures."""
        self.line = MtrLineInfo(
            code="ISL", name_en="Island Line", name_zh="港島綫", color="#007DC5"
        )

    def test_languages(self):
        """Test supported languages."""
        assert DEFAULT_LANGUAGE in SUPPORTED_LANGUAGES
        assert set(SUPPORTED_LANGUAGES) == {"en", "zh"}

    def test_get_localized_name(self):
        """Test names are chosen by language."""
        assert get_localized_name(self.line, "en") == "Island Line"
        assert get_localized_name(self.line, "zh") == "港島綫"

    def test_unknown_language_uses_english(self):
        """Test anything but zh gives the English name."""
        assert get_localized_name(self.line, "fr") == "Island Line"


class TestValidateMtrDirection:
    """Test URL direction validation."""

    def test_valid_directions(self):
        """Test up and down are accepted."""
        assert validate_mtr_direction("up") == "up"
        assert validate_mtr_direction("down") == "down"

    def test_invalid_directions(self):
        """Test anything else is rejected."""
        assert validate_mtr_direction("UP") is None
        assert validate_mtr_direction("DT") is None
        assert validate_mtr_direction("") is None
        assert validate_mtr_direction(None) is None
