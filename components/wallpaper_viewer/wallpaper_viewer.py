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


"""A full-screen viewer for one wallpaper with remix and download actions."""

import typing

import mesop as me

from common.utils import get_image_resolution


def _action_label(label: str):
    me.text(label, style=me.Style(font_size=12, font_weight=500, color="white"))


@me.component
def wallpaper_viewer(
    *,
    image: dict,
    on_close: typing.Callable[[me.ClickEvent], typing.Any],
    on_remix: typing.Callable[[me.ClickEvent], typing.Any],
    on_download: typing.Callable[[me.ClickEvent], typing.Any],
    download_url: str = "",
):
    """Covers the screen with `image`; action click keys are the image id.

    Once the image has been saved, `download_url` links to the file.
    """
    with me.box(
        style=me.Style(
            position="fixed",
            top=0,
            left=0,
            width="100%",
            height="100%",
            z_index=1000,
            background="black",
            display="flex",
            flex_direction="column",
        )
    ):
        me.image(
            src=image["data_url"],
            alt="Full screen",
            style=me.Style(
                position="absolute",
                top=0,
                left=0,
                width="100%",
                height="100%",
                object_fit="cover",
            ),
        )

        with me.box(
            style=me.Style(
                position="absolute",
                top=0,
                left=0,
                right=0,
                z_index=1,
                display="flex",
                justify_content="space-between",
                align_items="center",
                padding=me.Padding.all(16),
                background="linear-gradient(to bottom, rgba(0, 0, 0, 0.6), transparent)",
            )
        ):
            with me.content_button(on_click=on_close, type="icon"):
                me.icon("close", style=me.Style(color="white"))
            me.text(
                get_image_resolution(image["data_url"]),
                style=me.Style(font_size=12, color="#d4d4d4"),
            )

        # Action bar
        with me.box(
            style=me.Style(
                position="absolute",
                bottom=0,
                left=0,
                right=0,
                z_index=1,
                display="flex",
                flex_direction="row",
                gap=16,
                justify_content="center",
                align_items="flex-end",
                padding=me.Padding(top=48, right=24, bottom=24, left=24),
                background="linear-gradient(to top, black, rgba(0, 0, 0, 0.8), transparent)",
            )
        ):
            with me.box(
                style=me.Style(
                    display="flex", flex_direction="column", align_items="center", gap=4
                )
            ):
                with me.content_button(key=image["id"], on_click=on_remix, type="icon"):
                    me.icon("autorenew", style=me.Style(color="white"))
                _action_label("Remix")

            with me.box(
                style=me.Style(
                    display="flex", flex_direction="column", align_items="center", gap=4
                )
            ):
                with me.content_button(
                    key=image["id"],
                    on_click=on_download,
                    type="flat",
                    style=me.Style(
                        width=64,
                        height=64,
                        border_radius="50%",
                        background="white",
                        color="black",
                    ),
                ):
                    me.icon("download")
                _action_label("다운로드")
                if download_url:
                    me.link(
                        text="파일 받기",
                        url=download_url,
                        open_in_new_tab=True,
                        style=me.Style(font_size=12, color="#c084fc", text_decoration="underline"),
                    )
