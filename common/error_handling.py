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

import logging

# Dedicated logger for tracking the suppressed Mesop error
race_condition_logger = logging.getLogger("moodpaper.race_condition_tracker")


class GenerationFailure(Exception):
    """Raised when a generation cycle produced no images at all."""

    def __init__(self, message="No images were produced. Please try again."):
        self.message = message
        super().__init__(self.message)


class UnknownHandlerIdFilter(logging.Filter):
    """A logging filter to suppress 'Unknown handler id' errors."""

    def filter(self, record):
        # Mesop logs this when a click arrives for a component that re-rendered away
        if "Unknown handler id" in record.getMessage():
            race_condition_logger.info(
                "Suppressed 'Unknown handler id' error",
                extra={"original_record": record.getMessage()},
            )
            return False
        return True
