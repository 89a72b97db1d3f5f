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

"""Wallpaper generation with Gemini image models."""

import concurrent.futures
import functools
import time
import uuid

from google import genai
from google.genai import types
from pydantic import BaseModel, ConfigDict, Field

from common.analytics import get_logger, track_model_call
from common.error_handling import GenerationFailure
from common.utils import (
    DEFAULT_IMAGE_MIME_TYPE,
    convert_to_png,
    decode_image_payload,
    get_data_url_mime_type,
    to_data_url,
)
from config.default import Default
from config.wallpaper_models import get_wallpaper_model_config, resolve_model_name

logger = get_logger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class GeneratedImage(BaseModel):
    """A single generated wallpaper. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    # Full data URL: data:image/png;base64,...
    data_url: str
    prompt: str
    timestamp: int = Field(default_factory=_now_ms)

    @property
    def download_filename(self) -> str:
        return f"moodpaper-{self.id}.png"

    def image_bytes(self) -> bytes:
        return decode_image_payload(self.data_url)


@functools.lru_cache(maxsize=1)
def get_client() -> genai.Client:
    """Initializes the GenAI client, preferring an API key over Vertex AI."""
    cfg = Default()
    if cfg.GEMINI_API_KEY:
        return genai.Client(api_key=cfg.GEMINI_API_KEY)
    return genai.Client(vertexai=True, project=cfg.PROJECT_ID, location=cfg.LOCATION)


def build_instruction(prompt: str, is_remix: bool) -> str:
    """Frames the user's prompt as a remix instruction or a fresh wallpaper request."""
    if is_remix:
        return (
            f"Remix this image based on the following instruction: {prompt}. "
            "Ensure high quality, aesthetic phone wallpaper style."
        )
    return f"{prompt}. High quality, aesthetic phone wallpaper, 9:16 aspect ratio."


def build_contents(prompt: str, reference_image: str | None = None) -> list[types.Part]:
    """Builds the ordered request parts: the reference image first (if any), then the text."""
    parts = []
    if reference_image:
        parts.append(
            types.Part.from_bytes(
                data=decode_image_payload(reference_image),
                mime_type=get_data_url_mime_type(reference_image),
            )
        )
    parts.append(types.Part.from_text(text=build_instruction(prompt, is_remix=bool(reference_image))))
    return parts


def build_config(aspect_ratio: str) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_modalities=["TEXT", "IMAGE"],
        image_config=types.ImageConfig(aspect_ratio=aspect_ratio),
    )


def extract_image_data_url(response) -> str | None:
    """Returns the first inline image of the first candidate as a PNG data URL."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content else None
    for part in parts or []:
        inline_data = getattr(part, "inline_data", None)
        if inline_data and inline_data.data:
            data = inline_data.data
            # The SDK decodes to bytes; raw REST payloads stay base64 text
            if isinstance(data, str):
                data = decode_image_payload(data)
            if (inline_data.mime_type or DEFAULT_IMAGE_MIME_TYPE) != DEFAULT_IMAGE_MIME_TYPE:
                data = convert_to_png(data)
            return to_data_url(data, DEFAULT_IMAGE_MIME_TYPE)
    return None


def generate_single_image(
    client: genai.Client,
    model_name: str,
    contents: list[types.Part],
    config: types.GenerateContentConfig,
) -> str | None:
    """Makes one provider call. Failures are logged and reported as None."""
    try:
        response = client.models.generate_content(
            model=model_name,
            contents=contents,
            config=config,
        )
        data_url = extract_image_data_url(response)
        if not data_url:
            logger.warning(f"Model {model_name} returned no image for this variation.")
        return data_url
    except Exception as e:
        logger.warning(f"Error generating single image with {model_name}: {e}")
        return None


def generate_wallpapers(
    prompt: str,
    reference_image: str | None = None,
    *,
    client: genai.Client | None = None,
    variation_count: int | None = None,
) -> list[GeneratedImage]:
    """Generates wallpaper variations in parallel.

    Every variation is an independent request with the same contents. All of
    them are awaited; the ones that fail or return no image are dropped.

    Args:
        prompt: The user's mood description or remix instruction.
        reference_image: Optional data URL (or bare base64) of the image to remix.
        client: GenAI client; defaults to the shared client.
        variation_count: Number of parallel requests; defaults to VARIATION_COUNT.

    Returns:
        The successful images, in request order.

    Raises:
        ValueError: If the prompt is blank or variation_count is below 1.
        GenerationFailure: If no request produced an image.
    """
    if not prompt or not prompt.strip():
        raise ValueError("prompt must not be blank")

    cfg = Default()
    count = cfg.VARIATION_COUNT if variation_count is None else variation_count
    if count < 1:
        raise ValueError(f"variation_count must be at least 1, got {count}")
    model_name = resolve_model_name(cfg.MOODPAPER_MODEL)
    model_config = get_wallpaper_model_config(model_name)
    if model_config and cfg.WALLPAPER_ASPECT_RATIO not in model_config.supported_aspect_ratios:
        raise GenerationFailure(
            f"Model {model_name} does not support aspect ratio {cfg.WALLPAPER_ASPECT_RATIO}."
        )
    if reference_image and model_config and not model_config.supports_reference_image:
        raise GenerationFailure(f"Model {model_name} cannot remix a reference image.")

    client = client or get_client()
    contents = build_contents(prompt, reference_image)
    config = build_config(cfg.WALLPAPER_ASPECT_RATIO)

    with track_model_call(
        model_name=model_name,
        prompt_length=len(prompt),
        aspect_ratio=cfg.WALLPAPER_ASPECT_RATIO,
        is_remix=bool(reference_image),
        requested_images=count,
    ) as call_details:
        with concurrent.futures.ThreadPoolExecutor(max_workers=count) as executor:
            futures = [
                executor.submit(generate_single_image, client, model_name, contents, config)
                for _ in range(count)
            ]
            results = [future.result() for future in futures]

        images = [
            GeneratedImage(data_url=data_url, prompt=prompt)
            for data_url in results
            if data_url
        ]
        call_details["generated_images"] = len(images)

        if not images:
            raise GenerationFailure()

    logger.info(f"Generated {len(images)} of {count} wallpaper variations.")
    return images
