"""Server configuration dataclass.

Mirrors the server-side options of the audio player mod: where sounds are
looked up, how far each kind of player can be heard, and which permission
nodes guard the commands.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class SoundBindConfig:
    """Configuration for sound resolution and binding."""

    # ===========================================
    # RESOLUTION
    # ===========================================
    filebin_url: str = "https://filebin.net/"
    # Only uncompressed wav uploads are decodable by the playback layer
    accepted_content_type: str = "audio/wav"

    # ===========================================
    # RANGES (blocks)
    # ===========================================
    # Used when a binding carries no range of its own
    music_disc_range: float = 65.0
    goat_horn_range: float = 256.0
    # Hard ceiling for a per-item range override
    max_music_disc_range: float = 256.0
    max_goat_horn_range: float = 256.0

    # ===========================================
    # COMMANDS
    # ===========================================
    apply_permission: str = "soundbind.apply"
    set_static_permission: str = "soundbind.set_static"
    min_command_range: float = 1.0

    # ===========================================
    # LOGGING
    # ===========================================
    verbose: bool = False
    save_logs: bool = False

    def validate(self) -> "SoundBindConfig":
        """Check range settings are usable.

        Raises:
            ValueError: If a range is not positive or a default exceeds its maximum
        """
        ranges = {
            "music_disc_range": self.music_disc_range,
            "goat_horn_range": self.goat_horn_range,
            "max_music_disc_range": self.max_music_disc_range,
            "max_goat_horn_range": self.max_goat_horn_range,
            "min_command_range": self.min_command_range,
        }
        for name, value in ranges.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        if self.music_disc_range > self.max_music_disc_range:
            raise ValueError(
                f"music_disc_range ({self.music_disc_range}) exceeds "
                f"max_music_disc_range ({self.max_music_disc_range})"
            )
        if self.goat_horn_range > self.max_goat_horn_range:
            raise ValueError(
                f"goat_horn_range ({self.goat_horn_range}) exceeds "
                f"max_goat_horn_range ({self.max_goat_horn_range})"
            )
        if not self.filebin_url:
            raise ValueError("filebin_url must not be empty")
        return self

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "SoundBindConfig":
        """Build a config from environment variables (and a .env file if present).

        Unset variables keep the dataclass defaults.
        """
        load_dotenv(dotenv_path)

        config = cls()
        config.filebin_url = os.getenv("SOUNDBIND_FILEBIN_URL", config.filebin_url)
        config.music_disc_range = _env_float("SOUNDBIND_MUSIC_DISC_RANGE", config.music_disc_range)
        config.goat_horn_range = _env_float("SOUNDBIND_GOAT_HORN_RANGE", config.goat_horn_range)
        config.max_music_disc_range = _env_float(
            "SOUNDBIND_MAX_MUSIC_DISC_RANGE", config.max_music_disc_range
        )
        config.max_goat_horn_range = _env_float(
            "SOUNDBIND_MAX_GOAT_HORN_RANGE", config.max_goat_horn_range
        )
        config.verbose = os.getenv("SOUNDBIND_VERBOSE", "").lower() in ("1", "true", "yes")
        return config.validate()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
