# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import base64
import io
import logging

from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MIME_TYPE = "image/png"


def strip_data_url_prefix(encoded: str) -> str:
    """Returns the base64 payload of a data URL, or the input if it has no prefix.

    Args:
        encoded: Either "data:<mime>;base64,<payload>" or a bare base64 string.

    Returns:
        The bare base64 payload.
    """
    if encoded.startswith("data:"):
        _, _, payload = encoded.partition(",")
        return payload
    return encoded


def to_data_url(image_bytes: bytes, mime_type: str | None = None) -> str:
    """Encodes raw image bytes as a base64 data URL."""
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type or DEFAULT_IMAGE_MIME_TYPE};base64,{encoded}"


def decode_image_payload(encoded: str) -> bytes:
    """Decodes a data URL or bare base64 string into bytes."""
    return base64.b64decode(strip_data_url_prefix(encoded))


def get_data_url_mime_type(encoded: str, default: str = DEFAULT_IMAGE_MIME_TYPE) -> str:
    """Returns the MIME type named in a data URL prefix, or `default` for bare base64."""
    if encoded.startswith("data:"):
        header, _, _ = encoded.partition(",")
        mime_type = header[len("data:") :].split(";", 1)[0]
        if mime_type:
            return mime_type
    return default


def convert_to_png(image_bytes: bytes) -> bytes:
    """Re-encodes image bytes of any format Pillow can read as PNG."""
    with Image.open(io.BytesIO(image_bytes)) as img:
        if img.mode == "CMYK":
            img = img.convert("RGB")
        byte_io = io.BytesIO()
        img.save(byte_io, "PNG")
        return byte_io.getvalue()


def get_image_dimensions_from_base64(base64_string: str) -> tuple[int, int] | None:
    """Retrieves the width and height of an image from a base64 encoded string.

    Args:
        base64_string: The base64 encoded image data, with or without a data URL prefix.

    Returns:
        A tuple (width, height) if successful, or None if an error occurs.
    """
    try:
        image_stream = io.BytesIO(decode_image_payload(base64_string))
        with Image.open(image_stream) as img:
            return img.size
    except Exception as e:
        logger.info(f"App: Error getting image dimensions: {e}")
        return None


def get_image_resolution(base64_string: str) -> str:
    """Formats the image dimensions as "WxH", or "Unknown"."""
    dimensions = get_image_dimensions_from_base64(base64_string)
    if not dimensions:
        return "Unknown"
    width, height = dimensions
    return f"{width}x{height}"
