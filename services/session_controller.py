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

"""Session and view state transitions for the MoodPaper page.

The functions here mutate a page state object in place. Any object with the
fields of `state.moodpaper_state.PageState` works, which keeps the logic
testable without a running Mesop server. Generator functions yield after each
visible change so Mesop handlers can `yield from` them.
"""

import enum
import time
from dataclasses import dataclass
from typing import Any, Callable

from common.analytics import get_logger
from models.wallpaper import GeneratedImage, generate_wallpapers

logger = get_logger(__name__)

ERROR_BANNER_MESSAGE = "오류가 발생했습니다. 잠시 후 다시 시도해주세요."


class AppStatus(str, enum.Enum):
    IDLE = "idle"
    GENERATING = "generating"
    SUCCESS = "success"
    ERROR = "error"


def _noop(*args, **kwargs):
    return None


@dataclass
class SessionEffects:
    """Side effects triggered at defined transitions."""

    scroll_to_results: Callable[[], Any] = _noop
    scroll_to_prompt: Callable[[], Any] = _noop
    save_download: Callable[[GeneratedImage], Any] = _noop
    scroll_delay: float = 0.1
    sleep: Callable[[float], Any] = time.sleep


def can_generate(state) -> bool:
    """A cycle may start only with a non-blank prompt and none in flight."""
    return bool(state.prompt and state.prompt.strip()) and state.status != AppStatus.GENERATING


def update_prompt(state, text: str):
    state.prompt = text


def generate(state, effects: SessionEffects, generate_fn=generate_wallpapers):
    """Runs one generation cycle. Does nothing if `can_generate` is false."""
    if not can_generate(state):
        return

    # Captured before the call so the request uses exactly the chosen reference
    reference = state.reference_image
    reference_data_url = reference["data_url"] if reference else None

    state.status = AppStatus.GENERATING.value
    state.error_message = ""
    yield

    try:
        generated = generate_fn(state.prompt, reference_data_url)
    except Exception as ex:
        logger.error(f"Failed to generate wallpapers. Details: {ex}")
        state.status = AppStatus.ERROR.value
        state.error_message = ERROR_BANNER_MESSAGE
        yield
        return

    state.images = [image.model_dump() for image in generated]
    state.reference_image = None
    state.prompt = ""
    state.status = AppStatus.SUCCESS.value
    yield

    effects.sleep(effects.scroll_delay)
    effects.scroll_to_results()
    yield


def remix(state, image: dict, effects: SessionEffects):
    """Makes `image` the remix reference and returns to the prompt."""
    state.reference_image = image
    state.selected_image = None
    state.prompt = ""
    effects.scroll_to_prompt()


def clear_reference(state):
    state.reference_image = None


def select_image(state, image: dict):
    state.selected_image = image


def close_viewer(state):
    state.selected_image = None


def download(image: dict, effects: SessionEffects):
    """Hands the image to the download sink. Session state is not touched."""
    return effects.save_download(GeneratedImage.model_validate(image))
