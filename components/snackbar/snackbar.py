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


import mesop as me


@me.component
def snackbar(is_visible: bool, label: str, link_url: str = "", link_label: str = ""):
    """A bottom-anchored toast with an optional link."""
    if not is_visible:
        return
    with me.box(
        style=me.Style(
            position="fixed",
            bottom=24,
            left="50%",
            transform="translateX(-50%)",
            z_index=2000,
            display="flex",
            flex_direction="row",
            align_items="center",
            gap=12,
            padding=me.Padding.symmetric(vertical=12, horizontal=16),
            border_radius=12,
            background="#262626",
            color="white",
            font_size=14,
        )
    ):
        me.text(label)
        if link_url:
            me.link(
                text=link_label or link_url,
                url=link_url,
                style=me.Style(color="#c084fc", text_decoration="underline"),
            )
