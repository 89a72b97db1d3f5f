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


"""Badge showing the image a remix will be based on."""

import typing

import mesop as me


@me.component
def remix_badge(
    *,
    image_src: str,
    on_clear: typing.Callable[[me.ClickEvent], typing.Any],
):
    """Renders the reference thumbnail with a dismiss button."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            align_items="center",
            gap=8,
            width="max-content",
            margin=me.Margin(bottom=12),
            padding=me.Padding.all(8),
            border_radius=8,
            background="#262626",
            border=me.Border.all(me.BorderSide(width=1, style="solid", color="#404040")),
        )
    ):
        me.image(
            src=image_src,
            alt="Ref",
            style=me.Style(
                width=32,
                height=48,
                object_fit="cover",
                border_radius=4,
                background="#404040",
            ),
        )
        me.text("이 이미지를 Remix", style=me.Style(font_size=12, color="#d4d4d4"))
        with me.content_button(on_click=on_clear, type="icon"):
            me.icon("cancel", style=me.Style(color="#a3a3a3"))
