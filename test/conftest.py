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


import io
import threading
from types import SimpleNamespace

import pytest
from PIL import Image


def make_png_bytes(width: int = 9, height: int = 16, color: str = "purple") -> bytes:
    """Creates a small PNG in memory."""
    img = Image.new("RGB", (width, height), color=color)
    byte_io = io.BytesIO()
    img.save(byte_io, "PNG")
    return byte_io.getvalue()


def make_jpeg_bytes(width: int = 9, height: int = 16, color: str = "orange") -> bytes:
    img = Image.new("RGB", (width, height), color=color)
    byte_io = io.BytesIO()
    img.save(byte_io, "JPEG")
    return byte_io.getvalue()


def image_response(image_bytes: bytes, mime_type: str = "image/png"):
    """Mimics a generate_content response carrying one inline image."""
    part = SimpleNamespace(
        text=None,
        inline_data=SimpleNamespace(data=image_bytes, mime_type=mime_type),
    )
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def text_only_response(text: str = "I can't draw that."):
    part = SimpleNamespace(text=text, inline_data=None)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


class FakeModels:
    """Records generate_content calls and answers via `responder(call_index)`."""

    def __init__(self, responder):
        self.calls = []
        self._responder = responder
        self._lock = threading.Lock()

    def generate_content(self, *, model, contents, config):
        with self._lock:
            index = len(self.calls)
            self.calls.append({"model": model, "contents": contents, "config": config})
        result = self._responder(index)
        if isinstance(result, Exception):
            raise result
        return result


class FakeClient:
    def __init__(self, responder):
        self.models = FakeModels(responder)


@pytest.fixture
def png_bytes():
    return make_png_bytes()


@pytest.fixture
def fake_client_factory():
    return FakeClient


@pytest.fixture(autouse=True)
def moodpaper_env(monkeypatch, tmp_path):
    """Pins configuration so tests never depend on the developer's .env."""
    monkeypatch.setenv("MOODPAPER_MODEL", "gemini-2.5-flash-image")
    monkeypatch.setenv("WALLPAPER_ASPECT_RATIO", "9:16")
    monkeypatch.setenv("VARIATION_COUNT", "4")
    monkeypatch.setenv("DOWNLOAD_DIR", str(tmp_path / "downloads"))
    monkeypatch.delenv("K_SERVICE", raising=False)
