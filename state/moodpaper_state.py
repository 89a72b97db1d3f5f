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

from dataclasses import field

import mesop as me

from services.session_controller import AppStatus


@me.stateclass
class PageState:
    """MoodPaper Page State"""

    # pylint: disable=E3701:invalid-field-call

    status: str = AppStatus.IDLE.value
    prompt: str = ""
    # Bumped to reset the textarea after the prompt is cleared
    prompt_textarea_key: int = 0

    # GeneratedImage.model_dump() dicts of the current cycle
    images: list[dict] = field(default_factory=list)
    # Remix reference and full-screen image, also as GeneratedImage dumps
    reference_image: dict | None = None
    selected_image: dict | None = None

    error_message: str = ""

    show_snackbar: bool = False
    snackbar_message: str = ""
    last_download_url: str = ""
    # Ids saved to the download directory this session; the viewer links to them
    downloaded_image_ids: list[str] = field(default_factory=list)
