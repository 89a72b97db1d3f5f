# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Default configuration for MoodPaper, read from the environment."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv(override=True)


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Default:
    """Application settings. Instantiate per use so env overrides are picked up."""

    # Google Cloud (used when no API key is configured)
    PROJECT_ID: str | None = field(default_factory=lambda: os.environ.get("PROJECT_ID"))
    LOCATION: str = field(default_factory=lambda: os.environ.get("LOCATION", "us-central1"))

    # Gemini Developer API key; takes precedence over Vertex AI
    GEMINI_API_KEY: str | None = field(
        default_factory=lambda: os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
    )

    # Generation
    MOODPAPER_MODEL: str = field(
        default_factory=lambda: os.environ.get("MOODPAPER_MODEL", "gemini-2.5-flash-image")
    )
    WALLPAPER_ASPECT_RATIO: str = field(
        default_factory=lambda: os.environ.get("WALLPAPER_ASPECT_RATIO", "9:16")
    )
    VARIATION_COUNT: int = field(
        default_factory=lambda: int(os.environ.get("VARIATION_COUNT", "4"))
    )

    # Downloads are written here as moodpaper-<id>.png
    DOWNLOAD_DIR: str = field(default_factory=lambda: os.environ.get("DOWNLOAD_DIR", "downloads"))
    # Oldest saved wallpapers beyond this count are deleted
    DOWNLOAD_MAX_FILES: int = field(
        default_factory=lambda: int(os.environ.get("DOWNLOAD_MAX_FILES", "100"))
    )

    # UI
    SCROLL_DELAY_SECONDS: float = field(
        default_factory=lambda: float(os.environ.get("SCROLL_DELAY_SECONDS", "0.1"))
    )
    DEBUG_MODE: bool = field(default_factory=lambda: _env_bool("DEBUG_MODE"))

    def __post_init__(self):
        if self.VARIATION_COUNT < 1:
            raise ValueError(f"VARIATION_COUNT must be at least 1, got {self.VARIATION_COUNT}")
