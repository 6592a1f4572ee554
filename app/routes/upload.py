import logging
import os
import uuid
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import BaseModel, Field

from ..auth import get_current_user
from ..config import (
    MAX_IMAGE_SIZE,
    MAX_VIDEO_SIZE,
    R2_ACCESS_KEY_ID,
    R2_ACCOUNT_ID,
    R2_BUCKET_NAME,
    R2_PUBLIC_URL,
    R2_SECRET_ACCESS_KEY,
)
from ..models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["Upload"])

__all__ = ["router", "get_r2_client", "generate_presigned_url", "media_url"]

# Presigned URL expiration time (1 hour)
PRESIGNED_URL_EXPIRATION = 3600

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}

ALLOWED_VIDEO_TYPES = {
    "video/mp4": "mp4",
    "video/webm": "webm",
}

MAX_IMAGES_PER_REQUEST = 10

# Folder names double as the first key segment
ALLOWED_FOLDERS = {"general", "avatars", "vendors", "portfolio", "ideas", "reviews", "planning"}


class DeleteUploadRequest(BaseModel):
    key: str = Field(..., min_length=1, max_length=512)


def get_r2_client():
    """Create and return an R2 client."""
    return boto3.client(
        "s3",
        endpoint_url=f"https://{R2_ACCOUNT_ID}.r2.cloudflarestorage.com",
        aws_access_key_id=R2_ACCESS_KEY_ID,
        aws_secret_access_key=R2_SECRET_ACCESS_KEY,
        config=Config(signature_version="s3v4"),
    )


def generate_presigned_url(key: str, expiration: int = PRESIGNED_URL_EXPIRATION) -> str:
    """Generate a presigned URL for accessing a private object in R2."""
    r2 = get_r2_client()
    params = {"Bucket": R2_BUCKET_NAME, "Key": key, "ResponseContentDisposition": "inline"}
    url = r2.generate_presigned_url("get_object", Params=params, ExpiresIn=expiration)
    logger.info(f"✅ Generated presigned URL for key: {key}")
    return url


def media_url(key: str) -> str:
    """Public CDN URL when one is configured, otherwise a presigned link"""
    if R2_PUBLIC_URL:
        return f"{R2_PUBLIC_URL.rstrip('/')}/{key}"
    return generate_presigned_url(key)


def build_key(folder: str, user_id: int, extension: str) -> str:
    return f"{folder}/{user_id}/{uuid.uuid4()}.{extension}"


def _check_folder(folder: str) -> str:
    if folder not in ALLOWED_FOLDERS:
        raise HTTPException(
            status_code=400, detail=f"Invalid folder. Use one of: {', '.join(sorted(ALLOWED_FOLDERS))}"
        )
    return folder


def _check_filename(filename: Optional[str]):
    if not filename:
        return
    if os.path.basename(filename) != filename or ".." in filename:
        logger.warning(f"❌ Rejected filename: '{filename}'")
        raise HTTPException(status_code=400, detail="Invalid filename")
    if len(filename) > 255:
        raise HTTPException(status_code=400, detail="Filename too long - maximum 255 characters")


async def _read_validated(file: UploadFile, allowed: dict, max_size: int, kind: str) -> tuple[bytes, str]:
    """Check type, name and size; returns the body and the key extension"""
    if file.content_type not in allowed:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid file type. Allowed {kind} types: {', '.join(sorted(set(allowed)))}",
        )
    _check_filename(file.filename)

    contents = await file.read()
    if len(contents) > max_size:
        raise HTTPException(
            status_code=400,
            detail=f"File size exceeds {max_size // (1024 * 1024)}MB limit. "
            f"Your file is {len(contents) / (1024 * 1024):.2f}MB.",
        )
    return contents, allowed[file.content_type]


def _store(key: str, contents: bytes, content_type: str) -> dict:
    try:
        r2 = get_r2_client()
        r2.put_object(
            Bucket=R2_BUCKET_NAME,
            Key=key,
            Body=contents,
            ContentType=content_type,
            CacheControl="public, max-age=31536000",
        )
        return {"url": media_url(key), "key": key, "size": len(contents), "contentType": content_type}
    except (BotoCoreError, ClientError) as e:
        logger.error(f"❌ Upload failed for {key}: {e}")
        raise HTTPException(status_code=500, detail="Upload failed") from e


@router.post("/image")
async def upload_image(
    file: UploadFile = File(...),
    folder: str = Form("general"),
    current_user: User = Depends(get_current_user),
):
    """Upload one image (JPEG, PNG or WebP) to R2"""
    folder = _check_folder(folder)
    logger.info(f"📤 Uploading image to {folder} for user {current_user.id}")
    contents, extension = await _read_validated(file, ALLOWED_IMAGE_TYPES, MAX_IMAGE_SIZE, "image")
    return _store(build_key(folder, current_user.id, extension), contents, file.content_type)


@router.post("/images")
async def upload_images(
    files: list[UploadFile] = File(...),
    folder: str = Form("general"),
    current_user: User = Depends(get_current_user),
):
    """Upload several images in one request; all are validated before any is stored"""
    folder = _check_folder(folder)
    if len(files) > MAX_IMAGES_PER_REQUEST:
        raise HTTPException(status_code=400, detail=f"Maximum {MAX_IMAGES_PER_REQUEST} images per request")

    validated = []
    for file in files:
        contents, extension = await _read_validated(file, ALLOWED_IMAGE_TYPES, MAX_IMAGE_SIZE, "image")
        validated.append((contents, extension, file.content_type))

    logger.info(f"📤 Uploading {len(validated)} images to {folder} for user {current_user.id}")
    return {
        "files": [
            _store(build_key(folder, current_user.id, extension), contents, content_type)
            for contents, extension, content_type in validated
        ]
    }


@router.post("/video")
async def upload_video(
    file: UploadFile = File(...),
    folder: str = Form("general"),
    current_user: User = Depends(get_current_user),
):
    """Upload one video (MP4 or WebM) to R2"""
    folder = _check_folder(folder)
    logger.info(f"📤 Uploading video to {folder} for user {current_user.id}")
    contents, extension = await _read_validated(file, ALLOWED_VIDEO_TYPES, MAX_VIDEO_SIZE, "video")
    return _store(build_key(folder, current_user.id, extension), contents, file.content_type)


@router.delete("")
async def delete_upload(
    data: DeleteUploadRequest,
    current_user: User = Depends(get_current_user),
):
    """Delete an object the caller uploaded (keys carry the uploader's id)"""
    parts = data.key.split("/")
    if len(parts) != 3 or ".." in data.key or parts[1] != str(current_user.id):
        raise HTTPException(status_code=403, detail="You can only delete your own uploads")

    try:
        get_r2_client().delete_object(Bucket=R2_BUCKET_NAME, Key=data.key)
    except (BotoCoreError, ClientError) as e:
        logger.error(f"❌ Delete failed for {data.key}: {e}")
        raise HTTPException(status_code=500, detail="Delete failed") from e

    logger.info(f"🗑️ Deleted upload {data.key} for user {current_user.id}")
    return {"message": "File deleted successfully"}
