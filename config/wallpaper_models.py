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

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class WallpaperModelConfig:
    """Capabilities of a Gemini image model used for wallpaper generation."""

    version_id: str  # Short ID accepted in MOODPAPER_MODEL (e.g., "2.5-flash")
    model_name: str  # Full API Model ID (e.g., "gemini-2.5-flash-image")
    display_name: str

    # A remix sends exactly one reference image
    supports_reference_image: bool = True

    supported_aspect_ratios: List[str] = field(
        default_factory=lambda: ["1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9"]
    )


WALLPAPER_MODELS: List[WallpaperModelConfig] = [
    WallpaperModelConfig(
        version_id="2.5-flash",
        model_name="gemini-2.5-flash-image",
        display_name="Gemini 2.5 Flash Image",
    ),
    WallpaperModelConfig(
        version_id="3.0-pro-preview",
        model_name="gemini-3-pro-image-preview",
        display_name="Gemini 3.0 Pro Image Preview",
    ),
]


def get_wallpaper_model_config(model_name_or_version: str) -> Optional[WallpaperModelConfig]:
    """Finds config by either full model name or short version ID."""
    for model in WALLPAPER_MODELS:
        if model_name_or_version in (model.model_name, model.version_id):
            return model
    return None


def resolve_model_name(model_name_or_version: str) -> str:
    """Returns the API model name, passing unknown values through unchanged."""
    model = get_wallpaper_model_config(model_name_or_version)
    return model.model_name if model else model_name_or_version
