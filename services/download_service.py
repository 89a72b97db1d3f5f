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

"""Service for saving generated wallpapers to local disk."""

import glob
import os
import re

from common.analytics import analytics_logger
from config.default import Default
from models.wallpaper import GeneratedImage

_IMAGE_ID_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")

DOWNLOAD_ROUTE = "/api/wallpapers/download"


def download_url(image_id: str) -> str:
    """The HTTP path that serves a saved wallpaper as an attachment."""
    return f"{DOWNLOAD_ROUTE}/{image_id}"


class DownloadService:
    """Writes wallpapers as moodpaper-<id>.png under a download directory."""

    def __init__(self, download_dir: str | None = None, max_files: int | None = None):
        self._download_dir = download_dir
        self._max_files = max_files

    @property
    def download_dir(self) -> str:
        return self._download_dir or Default().DOWNLOAD_DIR

    @property
    def max_files(self) -> int:
        return self._max_files or Default().DOWNLOAD_MAX_FILES

    def save(self, image: GeneratedImage) -> str:
        """
        Writes the image payload to disk, then prunes the oldest saved files.

        Args:
            image: The wallpaper to save.

        Returns:
            The path of the written file.
        """
        os.makedirs(self.download_dir, exist_ok=True)
        path = os.path.join(self.download_dir, image.download_filename)
        with open(path, "wb") as f:
            f.write(image.image_bytes())
        analytics_logger.info(f"Saved wallpaper {image.id} to {path}")
        self._prune(keep=path)
        return path

    def _prune(self, keep: str):
        saved = [
            path
            for path in glob.glob(os.path.join(self.download_dir, "moodpaper-*.png"))
            if path != keep
        ]
        excess = len(saved) + 1 - self.max_files
        if excess <= 0:
            return
        saved.sort(key=os.path.getmtime)
        for path in saved[:excess]:
            os.remove(path)
            analytics_logger.info(f"Removed old download {path}")

    def path_for(self, image_id: str) -> str | None:
        """Returns the saved file for an image id, or None if it is not on disk."""
        if not _IMAGE_ID_PATTERN.match(image_id):
            return None
        path = os.path.join(self.download_dir, f"moodpaper-{image_id}.png")
        if not os.path.isfile(path):
            return None
        return path


# Global instance
download_service = DownloadService()
