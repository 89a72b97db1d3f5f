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


"""The sticky MoodPaper app header."""

import mesop as me


@me.component
def header(title: str, icon: str = "auto_awesome"):
    """Renders the app title next to a round accent icon."""
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            align_items="center",
            gap=8,
            padding=me.Padding(top=40, right=24, bottom=24, left=24),
            position="sticky",
            top=0,
            z_index=10,
            background="linear-gradient(to bottom, rgba(0, 0, 0, 0.8), transparent)",
        )
    ):
        with me.box(
            style=me.Style(
                width=32,
                height=32,
                border_radius="50%",
                background="#9333ea",
                display="flex",
                align_items="center",
                justify_content="center",
                box_shadow="0 0 15px rgba(147, 51, 234, 0.5)",
            )
        ):
            me.icon(icon, style=me.Style(color="white", font_size=20, width=20, height=20))
        me.text(
            title,
            style=me.Style(
                font_size=20,
                font_weight="bold",
                letter_spacing="-0.025em",
                color="#c084fc",
            ),
        )
