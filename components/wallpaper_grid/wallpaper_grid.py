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


"""Two-column grid of generated wallpaper thumbnails."""

import typing

import mesop as me


@me.component
def wallpaper_grid(
    *,
    images: list[dict],
    on_select: typing.Callable[[me.ClickEvent], typing.Any],
    aspect_ratio: str = "9:16",
):
    """Renders each image as a tappable 9:16 tile; the click key is the image id."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            align_items="center",
            justify_content="space-between",
            margin=me.Margin(bottom=16),
        )
    ):
        me.text("결과물", style=me.Style(font_size=18, font_weight=500, color="white"))
        me.text(
            f"{aspect_ratio} Ratio",
            style=me.Style(
                font_size=12,
                color="#737373",
                background="#171717",
                padding=me.Padding.symmetric(vertical=4, horizontal=8),
                border_radius=9999,
                border=me.Border.all(me.BorderSide(width=1, style="solid", color="#262626")),
            ),
        )

    with me.box(
        style=me.Style(
            display="grid",
            grid_template_columns="repeat(2, 1fr)",
            gap=12,
        )
    ):
        for image in images:
            with me.box(
                key=image["id"],
                on_click=on_select,
                style=me.Style(
                    aspect_ratio=aspect_ratio.replace(":", "/"),
                    position="relative",
                    cursor="pointer",
                    overflow_x="hidden",
                    overflow_y="hidden",
                    border_radius=12,
                    border=me.Border.all(me.BorderSide(width=1, style="solid", color="#262626")),
                    background="#171717",
                ),
            ):
                me.image(
                    src=image["data_url"],
                    alt="Generated wallpaper",
                    style=me.Style(width="100%", height="100%", object_fit="cover"),
                )
