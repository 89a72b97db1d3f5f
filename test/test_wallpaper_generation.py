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


import base64
import io
import threading
import time

import pytest
from PIL import Image
from pydantic import ValidationError

from common.error_handling import GenerationFailure
from conftest import image_response, make_jpeg_bytes, make_png_bytes, text_only_response
from config import wallpaper_models
from config.wallpaper_models import WallpaperModelConfig
from config.default import Default
from models.wallpaper import (
    GeneratedImage,
    build_instruction,
    extract_image_data_url,
    generate_wallpapers,
)


def test_fresh_generation_sends_four_wallpaper_requests(fake_client_factory, png_bytes):
    """Scenario: a plain mood prompt fans out to four fresh-generation calls at 9:16."""
    client = fake_client_factory(lambda i: image_response(png_bytes))

    images = generate_wallpapers("rainy pastel city skyline", client=client)

    assert len(client.models.calls) == 4
    for call in client.models.calls:
        assert call["model"] == "gemini-2.5-flash-image"
        assert call["config"].image_config.aspect_ratio == "9:16"
        parts = call["contents"]
        assert len(parts) == 1
        assert parts[0].text == (
            "rainy pastel city skyline. High quality, aesthetic phone wallpaper, 9:16 aspect ratio."
        )
        assert "Remix" not in parts[0].text

    assert len(images) == 4
    assert all(image.prompt == "rainy pastel city skyline" for image in images)
    assert len({image.id for image in images}) == 4


def test_remix_sends_reference_before_instruction(fake_client_factory, png_bytes):
    reference_bytes = make_png_bytes(color="navy")
    reference = "data:image/png;base64," + base64.b64encode(reference_bytes).decode("utf-8")
    client = fake_client_factory(lambda i: image_response(png_bytes))

    generate_wallpapers("darker, add rain", reference, client=client)

    assert len(client.models.calls) == 4
    for call in client.models.calls:
        image_part, text_part = call["contents"]
        assert image_part.inline_data.data == reference_bytes
        assert image_part.inline_data.mime_type == "image/png"
        assert text_part.text.startswith(
            "Remix this image based on the following instruction: darker, add rain."
        )


def test_remix_accepts_bare_base64_reference(fake_client_factory, png_bytes):
    reference_bytes = make_png_bytes(color="teal")
    client = fake_client_factory(lambda i: image_response(png_bytes))

    generate_wallpapers(
        "warmer tones", base64.b64encode(reference_bytes).decode("utf-8"), client=client
    )

    assert client.models.calls[0]["contents"][0].inline_data.data == reference_bytes


@pytest.mark.parametrize("successes", [1, 2, 3])
def test_partial_success_returns_only_successful_images(fake_client_factory, png_bytes, successes):
    def responder(index):
        if index < successes:
            return image_response(png_bytes)
        return RuntimeError("quota exceeded")

    client = fake_client_factory(responder)

    images = generate_wallpapers("neon forest", client=client)

    assert len(client.models.calls) == 4
    assert len(images) == successes
    assert len({image.id for image in images}) == successes
    assert all(image.prompt == "neon forest" for image in images)


def test_empty_and_text_only_responses_contribute_nothing(fake_client_factory, png_bytes):
    empty = type("Response", (), {"candidates": []})()
    answers = [image_response(png_bytes), empty, text_only_response(), RuntimeError("boom")]
    client = fake_client_factory(lambda i: answers[i])

    images = generate_wallpapers("foggy harbor", client=client)

    assert len(images) == 1


def test_all_calls_failing_raises_generation_failure(fake_client_factory):
    client = fake_client_factory(lambda i: RuntimeError("network down"))

    with pytest.raises(GenerationFailure):
        generate_wallpapers("sunset dunes", client=client)

    assert len(client.models.calls) == 4


@pytest.mark.parametrize("prompt", ["", "   "])
def test_blank_prompt_is_rejected_before_any_call(fake_client_factory, png_bytes, prompt):
    client = fake_client_factory(lambda i: image_response(png_bytes))

    with pytest.raises(ValueError):
        generate_wallpapers(prompt, client=client)

    assert client.models.calls == []


def test_variation_count_comes_from_config(monkeypatch, fake_client_factory, png_bytes):
    monkeypatch.setenv("VARIATION_COUNT", "2")
    client = fake_client_factory(lambda i: image_response(png_bytes))

    images = generate_wallpapers("autumn leaves", client=client)

    assert len(client.models.calls) == 2
    assert len(images) == 2


def test_short_model_version_is_resolved(monkeypatch, fake_client_factory, png_bytes):
    monkeypatch.setenv("MOODPAPER_MODEL", "3.0-pro-preview")
    client = fake_client_factory(lambda i: image_response(png_bytes))

    generate_wallpapers("starry night", client=client)

    assert client.models.calls[0]["model"] == "gemini-3-pro-image-preview"


def test_unsupported_aspect_ratio_fails_without_calls(monkeypatch, fake_client_factory, png_bytes):
    monkeypatch.setenv("WALLPAPER_ASPECT_RATIO", "7:5")
    client = fake_client_factory(lambda i: image_response(png_bytes))

    with pytest.raises(GenerationFailure):
        generate_wallpapers("starry night", client=client)

    assert client.models.calls == []


def test_extract_image_data_url_keeps_png_payload(png_bytes):
    data_url = extract_image_data_url(image_response(png_bytes))

    assert data_url.startswith("data:image/png;base64,")
    assert base64.b64decode(data_url.split(",", 1)[1]) == png_bytes


def test_extract_image_data_url_reencodes_jpeg_as_png():
    data_url = extract_image_data_url(image_response(make_jpeg_bytes(), mime_type="image/jpeg"))

    assert data_url.startswith("data:image/png;base64,")
    with Image.open(io.BytesIO(base64.b64decode(data_url.split(",", 1)[1]))) as img:
        assert img.format == "PNG"
        assert img.size == (9, 16)


def test_extract_image_data_url_decodes_base64_text(png_bytes):
    encoded = base64.b64encode(png_bytes).decode("utf-8")

    data_url = extract_image_data_url(image_response(encoded))

    assert base64.b64decode(data_url.split(",", 1)[1]) == png_bytes


def test_extract_image_data_url_handles_missing_content():
    assert extract_image_data_url(None) is None
    assert extract_image_data_url(text_only_response()) is None


def test_build_instruction_framing():
    assert build_instruction("misty lake", is_remix=False).endswith("9:16 aspect ratio.")
    assert build_instruction("misty lake", is_remix=True).startswith("Remix this image")


def test_generated_image_is_immutable(png_bytes):
    image = GeneratedImage(
        data_url="data:image/png;base64," + base64.b64encode(png_bytes).decode("utf-8"),
        prompt="calm ocean",
    )

    with pytest.raises(ValidationError):
        image.prompt = "stormy ocean"

    assert image.image_bytes() == png_bytes
    assert image.download_filename == f"moodpaper-{image.id}.png"
    assert image.timestamp > 0


def test_variations_are_in_flight_at_the_same_time(fake_client_factory, png_bytes):
    all_started = threading.Barrier(4, timeout=5)

    def responder(index):
        # Breaks (and the call fails) unless all four calls overlap
        all_started.wait()
        return image_response(png_bytes)

    client = fake_client_factory(responder)

    images = generate_wallpapers("city lights at dusk", client=client)

    assert len(images) == 4


def test_slow_variation_is_collected_after_a_sibling_fails(fake_client_factory, png_bytes):
    sibling_failed = threading.Event()
    slow_bytes = make_png_bytes(color="gold")

    def responder(index):
        if index == 0:
            sibling_failed.set()
            return RuntimeError("rate limited")
        if index == 1:
            assert sibling_failed.wait(timeout=5)
            time.sleep(0.2)
            return image_response(slow_bytes)
        return image_response(png_bytes)

    client = fake_client_factory(responder)

    images = generate_wallpapers("desert bloom", client=client)

    assert len(client.models.calls) == 4
    assert len(images) == 3
    assert slow_bytes in [image.image_bytes() for image in images]


def test_zero_variation_count_is_rejected(fake_client_factory, png_bytes):
    client = fake_client_factory(lambda i: image_response(png_bytes))

    with pytest.raises(ValueError):
        generate_wallpapers("glacier", client=client, variation_count=0)

    assert client.models.calls == []


def test_config_rejects_zero_variation_count(monkeypatch):
    monkeypatch.setenv("VARIATION_COUNT", "0")

    with pytest.raises(ValueError):
        Default()


def test_remix_requires_reference_support(monkeypatch, fake_client_factory, png_bytes):
    monkeypatch.setattr(
        wallpaper_models,
        "WALLPAPER_MODELS",
        [
            WallpaperModelConfig(
                version_id="2.5-flash",
                model_name="gemini-2.5-flash-image",
                display_name="Gemini 2.5 Flash Image",
                supports_reference_image=False,
            )
        ],
    )
    reference = "data:image/png;base64," + base64.b64encode(png_bytes).decode("utf-8")
    client = fake_client_factory(lambda i: image_response(png_bytes))

    with pytest.raises(GenerationFailure):
        generate_wallpapers("add snow", reference, client=client)
    assert client.models.calls == []

    assert len(generate_wallpapers("add snow", client=client)) == 4


def test_remix_reference_uses_declared_mime_type(fake_client_factory, png_bytes):
    jpeg_bytes = make_jpeg_bytes()
    reference = "data:image/jpeg;base64," + base64.b64encode(jpeg_bytes).decode("utf-8")
    client = fake_client_factory(lambda i: image_response(png_bytes))

    generate_wallpapers("softer light", reference, client=client)

    image_part = client.models.calls[0]["contents"][0]
    assert image_part.inline_data.mime_type == "image/jpeg"
    assert image_part.inline_data.data == jpeg_bytes


def test_jpeg_result_is_stored_and_remixed_as_png(fake_client_factory, png_bytes):
    client = fake_client_factory(
        lambda i: image_response(make_jpeg_bytes(), mime_type="image/jpeg")
    )

    result = generate_wallpapers("orange grove", client=client)[0]

    assert result.data_url.startswith("data:image/png;base64,")
    assert result.download_filename == f"moodpaper-{result.id}.png"

    remix_client = fake_client_factory(lambda i: image_response(png_bytes))
    generate_wallpapers("make it night", result.data_url, client=remix_client)

    image_part = remix_client.models.calls[0]["contents"][0]
    assert image_part.inline_data.mime_type == "image/png"
    assert image_part.inline_data.data == result.image_bytes()
