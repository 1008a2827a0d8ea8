"""
Unit Tests for Settings
"""

import pytest
from pydantic import ValidationError

from genibi.config import Settings


class TestSettings:

    def test_debug_rejected_in_production(self) -> None:
        with pytest.raises(ValidationError, match="debug must be disabled"):
            Settings(env="production", debug=True)

    def test_production_without_debug(self) -> None:
        settings = Settings(env="production", debug=False)
        assert settings.is_production()

    def test_debug_allowed_in_development(self) -> None:
        assert Settings(env="development", debug=True).debug

    def test_default_max_message_length(self) -> None:
        assert Settings().chat.max_message_length == 2000
