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


"""FastAPI entrypoint serving the MoodPaper Mesop app and its API."""

import logging
import os

import mesop as me
from fastapi import FastAPI
from fastapi.middleware.wsgi import WSGIMiddleware

from common.error_handling import UnknownHandlerIdFilter
from config.default import Default
from routers.wallpaper_router import router as wallpaper_router

# Register the Mesop page before the WSGI app is created
import pages.moodpaper  # noqa: F401  pylint: disable=unused-import

logging.basicConfig(level=logging.INFO)
for handler in logging.getLogger().handlers:
    handler.addFilter(UnknownHandlerIdFilter())

app = FastAPI(title="MoodPaper")
app.include_router(wallpaper_router)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


app.mount(
    "/",
    WSGIMiddleware(
        me.create_wsgi_app(debug_mode=Default().DEBUG_MODE)
    ),
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8080")),
        reload=Default().DEBUG_MODE,
    )
