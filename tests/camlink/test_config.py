"""
Tests for camlink configuration.

Tests the Settings and sub-config classes.
"""

from camlink.config import CameraConfig, MotionConfig, Settings, get_settings


class TestMotionConfig:
    """Tests for MotionConfig."""

    def test_default_values(self):
        """Test default configuration values."""
        config = MotionConfig()
        assert config.queue_size == 20
        assert config.default_min_duration == 0.0

    def test_env_override(self, monkeypatch):
        """Test environment variable override."""
        monkeypatch.setenv("CAMLINK_MOTION_QUEUE_SIZE", "5")
        monkeypatch.setenv("CAMLINK_MOTION_DEFAULT_MIN_DURATION", "2.5")
        config = MotionConfig()
        assert config.queue_size == 5
        assert config.default_min_duration == 2.5


class TestCameraConfig:
    """Tests for CameraConfig."""

    def test_default_values(self):
        config = CameraConfig()
        assert config.channel_id == 0
        assert config.command_timeout == 10.0

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CAMLINK_CAMERA_CHANNEL_ID", "3")
        config = CameraConfig()
        assert config.channel_id == 3


class TestSettings:
    """Tests for the settings aggregator."""

    def test_sub_configs(self):
        config = Settings()
        assert isinstance(config.motion, MotionConfig)
        assert isinstance(config.camera, CameraConfig)
        assert config.log_level == "INFO"

    def test_log_level_override(self, monkeypatch):
        monkeypatch.setenv("CAMLINK_LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
