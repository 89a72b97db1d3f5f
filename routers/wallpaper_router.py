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

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse

from common.error_handling import GenerationFailure
from models import wallpaper
from models.requests import WallpaperGenerationRequest, WallpaperGenerationResponse
from services.download_service import download_service

router = APIRouter(prefix="/api/wallpapers", tags=["wallpapers"])


@router.post("/generate", response_model=WallpaperGenerationResponse)
async def generate_wallpapers(request: WallpaperGenerationRequest):
    """
    Generates wallpaper variations for a prompt, remixing the reference
    image when one is given.
    """
    try:
        images = await run_in_threadpool(
            wallpaper.generate_wallpapers, request.prompt, request.reference_image
        )
    except GenerationFailure as e:
        raise HTTPException(status_code=502, detail=e.message)
    return WallpaperGenerationResponse(images=images)


@router.get("/download/{image_id}")
async def download_wallpaper(image_id: str):
    """
    Returns a previously saved wallpaper as an attachment.
    """
    path = download_service.path_for(image_id)
    if not path:
        raise HTTPException(status_code=404, detail="Wallpaper not found")
    return FileResponse(path, media_type="image/png", filename=f"moodpaper-{image_id}.png")
