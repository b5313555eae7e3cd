"""
Configuration management for camlink.

Uses Pydantic Settings for environment variable parsing.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MotionConfig(BaseSettings):
    """Motion pipeline configuration."""

    model_config = SettingsConfigDict(env_prefix="CAMLINK_MOTION_")

    queue_size: int = Field(
        default=20,
        description="Capacity of the listener-to-session status queue",
    )
    default_min_duration: float = Field(
        default=0.0,
        description="Seconds a motion state must hold before await_start/await_stop return",
    )


class CameraConfig(BaseSettings):
    """Camera command configuration."""

    model_config = SettingsConfigDict(env_prefix="CAMLINK_CAMERA_")

    channel_id: int = Field(
        default=0,
        description="Camera channel on a multi-channel device",
    )
    command_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for a command acknowledgement",
    )


class Settings(BaseSettings):
    """Main settings aggregator."""

    model_config = SettingsConfigDict(
        env_prefix="CAMLINK_",
        env_file=".env",
        extra="ignore",
    )

    # Sub-configurations
    motion: MotionConfig = Field(default_factory=MotionConfig)
    camera: CameraConfig = Field(default_factory=CameraConfig)

    # Logging
    log_level: str = Field(default="INFO", description="Log level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
