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

"""MoodPaper: mood-to-wallpaper generation with remix and download."""

import time
import uuid

import mesop as me

from common.analytics import analytics_logger, log_page_view, log_ui_click, track_click
from components.header.header import header
from components.remix_badge.remix_badge import remix_badge
from components.snackbar.snackbar import snackbar
from components.wallpaper_grid.wallpaper_grid import wallpaper_grid
from components.wallpaper_viewer.wallpaper_viewer import wallpaper_viewer
from config.default import Default as cfg
from services import session_controller
from services.download_service import download_service, download_url
from services.session_controller import AppStatus, SessionEffects
from state.moodpaper_state import PageState
from state.state import AppState

PAGE_NAME = "moodpaper"
RESULTS_KEY = "results"
PROMPT_KEY = "prompt_section"

PROMPT_PLACEHOLDER = "예: 비 오는 서정적인 도시 풍경, 파스텔 톤 구름"
REMIX_PLACEHOLDER = "어떻게 변경할까요? (예: 더 어둡게, 비 내리는 효과 추가)"


def _effects() -> SessionEffects:
    return SessionEffects(
        scroll_to_results=lambda: me.scroll_into_view(key=RESULTS_KEY),
        scroll_to_prompt=lambda: me.scroll_into_view(key=PROMPT_KEY),
        save_download=download_service.save,
        scroll_delay=cfg().SCROLL_DELAY_SECONDS,
    )


def _find_image(state: PageState, image_id: str) -> dict | None:
    return next((image for image in state.images if image["id"] == image_id), None)


def _log_click(element_id: str):
    app_state = me.state(AppState)
    log_ui_click(
        element_id=element_id,
        page_name=app_state.current_page,
        session_id=app_state.session_id,
    )


def _reset_prompt_textarea(state: PageState):
    # Mesop keeps the textarea's own value unless its key changes
    state.prompt_textarea_key += 1


def moodpaper_page_content():
    """Renders the mobile-width MoodPaper UI."""
    state = me.state(PageState)
    is_generating = state.status == AppStatus.GENERATING
    submit_disabled = not session_controller.can_generate(state)

    with me.box(
        style=me.Style(
            min_height="100vh",
            background="#171717",
            color="white",
            display="flex",
            justify_content="center",
        )
    ):
        with me.box(
            style=me.Style(
                width="100%",
                max_width=448,
                min_height="100vh",
                background="black",
                position="relative",
                display="flex",
                flex_direction="column",
            )
        ):
            header("MoodPaper")

            with me.box(style=me.Style(flex_grow=1, padding=me.Padding(right=16, bottom=96, left=16))):
                # Input section
                with me.box(key=PROMPT_KEY, style=me.Style(margin=me.Margin(top=16, bottom=32))):
                    me.text(
                        "어떤 분위기를",
                        style=me.Style(font_size=24, font_weight=600, line_height="1.25"),
                    )
                    me.text(
                        "만들고 싶으신가요?",
                        style=me.Style(
                            font_size=24,
                            font_weight=600,
                            color="#a3a3a3",
                            margin=me.Margin(bottom=8),
                        ),
                    )

                    with me.box(
                        style=me.Style(
                            background="#171717",
                            border_radius=16,
                            padding=me.Padding.all(16),
                            border=me.Border.all(
                                me.BorderSide(width=1, style="solid", color="#262626")
                            ),
                        )
                    ):
                        if state.reference_image:
                            remix_badge(
                                image_src=state.reference_image["data_url"],
                                on_clear=on_clear_reference_click,
                            )
                        me.native_textarea(
                            key=str(state.prompt_textarea_key),
                            value=state.prompt,
                            placeholder=REMIX_PLACEHOLDER if state.reference_image else PROMPT_PLACEHOLDER,
                            on_input=on_prompt_input,
                            style=me.Style(
                                width="100%",
                                height=96,
                                background="transparent",
                                color="white",
                                font_size=18,
                                border=me.Border.all(me.BorderSide(style="none")),
                            ),
                        )

                    with me.content_button(
                        on_click=on_generate_click,
                        disabled=submit_disabled,
                        type="flat",
                        style=me.Style(
                            width="100%",
                            margin=me.Margin(top=16),
                            padding=me.Padding.symmetric(vertical=16),
                            border_radius=9999,
                            font_weight="bold",
                            font_size=18,
                            background="#262626" if submit_disabled else "white",
                            color="#737373" if submit_disabled else "black",
                        ),
                    ):
                        with me.box(
                            style=me.Style(
                                display="flex",
                                flex_direction="row",
                                align_items="center",
                                justify_content="center",
                                gap=8,
                            )
                        ):
                            if is_generating:
                                me.progress_spinner(diameter=20, stroke_width=3)
                                me.text("생성 중...")
                            else:
                                me.icon("auto_awesome", style=me.Style(color="#9333ea"))
                                me.text("Remix 하기" if state.reference_image else "생성하기")

                if state.status == AppStatus.ERROR:
                    me.text(
                        state.error_message or session_controller.ERROR_BANNER_MESSAGE,
                        style=me.Style(
                            text_align="center",
                            padding=me.Padding.all(16),
                            margin=me.Margin(bottom=24),
                            border_radius=12,
                            background="rgba(127, 29, 29, 0.2)",
                            color="#fca5a5",
                        ),
                    )

                if state.images:
                    with me.box(key=RESULTS_KEY):
                        wallpaper_grid(
                            images=state.images,
                            on_select=on_thumbnail_click,
                            aspect_ratio=cfg().WALLPAPER_ASPECT_RATIO,
                        )

            if state.selected_image:
                wallpaper_viewer(
                    image=state.selected_image,
                    on_close=on_close_viewer_click,
                    on_remix=on_remix_click,
                    on_download=on_download_click,
                    download_url=(
                        download_url(state.selected_image["id"])
                        if state.selected_image["id"] in state.downloaded_image_ids
                        else ""
                    ),
                )

        snackbar(
            is_visible=state.show_snackbar,
            label=state.snackbar_message,
            link_url=state.last_download_url,
            link_label="열기",
        )


def on_prompt_input(e: me.InputEvent):
    """Stores the prompt as the user types so the submit button tracks it."""
    session_controller.update_prompt(me.state(PageState), e.value)


def on_generate_click(e: me.ClickEvent):
    """Event handler for the main generate / remix button."""
    state = me.state(PageState)
    if not session_controller.can_generate(state):
        return

    _log_click("moodpaper_remix_submit" if state.reference_image else "moodpaper_generate_button")

    prompt_reset = False
    for _ in session_controller.generate(state, _effects()):
        if state.status == AppStatus.SUCCESS and not prompt_reset:
            _reset_prompt_textarea(state)
            prompt_reset = True
        yield


def on_thumbnail_click(e: me.ClickEvent):
    """Opens the tapped result full-screen."""
    state = me.state(PageState)
    image = _find_image(state, e.key)
    if image:
        session_controller.select_image(state, image)
    yield


def on_close_viewer_click(e: me.ClickEvent):
    session_controller.close_viewer(me.state(PageState))
    yield


@track_click(element_id="moodpaper_remix_button")
def on_remix_click(e: me.ClickEvent):
    """Uses the viewed image as the reference for the next generation."""
    state = me.state(PageState)
    image = _find_image(state, e.key) or state.selected_image
    if not image:
        return
    session_controller.remix(state, image, _effects())
    _reset_prompt_textarea(state)
    yield


def on_clear_reference_click(e: me.ClickEvent):
    session_controller.clear_reference(me.state(PageState))
    yield


@track_click(element_id="moodpaper_download_button")
def on_download_click(e: me.ClickEvent):
    """Saves the viewed image and links to it."""
    state = me.state(PageState)
    image = _find_image(state, e.key) or state.selected_image
    if not image:
        return
    try:
        session_controller.download(image, _effects())
    except OSError as ex:
        analytics_logger.error(f"Failed to save wallpaper {image['id']}: {ex}")
        state.last_download_url = ""
        yield from show_snackbar(state, "다운로드에 실패했습니다.")
        return
    if image["id"] not in state.downloaded_image_ids:
        state.downloaded_image_ids.append(image["id"])
    state.last_download_url = download_url(image["id"])
    yield from show_snackbar(state, "다운로드 완료")


def show_snackbar(state: PageState, message: str):
    """Displays a snackbar message at the bottom of the page."""
    state.snackbar_message = message
    state.show_snackbar = True
    yield
    time.sleep(3)
    state.show_snackbar = False
    yield


def on_load(e: me.LoadEvent):
    """Records the page view for this session."""
    app_state = me.state(AppState)
    if not app_state.session_id:
        app_state.session_id = str(uuid.uuid4())
    app_state.current_page = PAGE_NAME
    log_page_view(PAGE_NAME, session_id=app_state.session_id)
    yield


@me.page(
    path="/",
    title="MoodPaper",
    on_load=on_load,
)
@me.page(
    path="/moodpaper",
    title="MoodPaper",
    on_load=on_load,
)
def page():
    """Define the Mesop page routes for MoodPaper."""
    moodpaper_page_content()
