import logging
from pathlib import PurePosixPath
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from app.core.config import settings
from app.core.deps import get_storage
from app.core.errors import UPLOAD_FAILED
from app.core.storage import Storage, StorageError, normalise_key
from app.schemas.upload import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _object_key(parent: Optional[str], filename: str) -> str:
    # Only the final component of the client-supplied name is kept
    name = PurePosixPath(filename.replace("\\", "/")).name
    return normalise_key(f"{parent or ''}/{name}")


@router.post("/r2", response_model=UploadResponse)
def upload_file(
    file: UploadFile = File(None),
    parent: str = Form(None),
    filename: str = Form(None),
    storage: Storage = Depends(get_storage),
):
    """
    Store one file (logo, banner, gallery image, KYC document) and return a signed URL
    valid for seven days plus the object key.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")
    content = file.file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE_BYTES:
        raise HTTPException(
            status_code=400,
            detail=f"File must be under {settings.MAX_UPLOAD_SIZE_BYTES // (1024 * 1024)}MB",
        )
    try:
        key = _object_key(parent, filename or file.filename)
    except StorageError:
        raise HTTPException(status_code=400, detail="Invalid file name")

    try:
        storage.put_bytes(key, content, content_type=file.content_type)
        url = storage.signed_url(key, settings.SIGNED_URL_EXPIRE_SECONDS)
    except (StorageError, BotoCoreError, ClientError, OSError):
        logger.exception("Upload of %s failed", key)
        raise HTTPException(status_code=500, detail=UPLOAD_FAILED)

    logger.info("Uploaded %s (%d bytes)", key, len(content))
    return UploadResponse(url=url, path=key)
