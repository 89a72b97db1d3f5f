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

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from models.wallpaper import GeneratedImage


class WallpaperGenerationRequest(BaseModel):
    """
    Defines the contract for a wallpaper generation request.
    The page hands the same two values to the orchestrator; the API
    router accepts this schema directly.
    """

    prompt: str = Field(..., min_length=1)
    # A data URL or bare base64 PNG to remix from
    reference_image: Optional[str] = None

    @field_validator("prompt")
    @classmethod
    def prompt_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be blank")
        return value


class WallpaperGenerationResponse(BaseModel):
    """The generated images of one cycle."""

    images: List[GeneratedImage]
