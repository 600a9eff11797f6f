"""Object storage for uploaded store images and documents (local disk or Cloudflare R2)."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from app.core.config import settings


class StorageError(RuntimeError):
    pass


def normalise_key(key: str) -> str:
    """Forward slashes, no leading slash, no empty or parent segments."""
    parts = [p for p in key.replace("\\", "/").split("/") if p and p not in (".", "..")]
    if not parts:
        raise StorageError("Empty storage key")
    return "/".join(parts)


class Storage:
    def put_bytes(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        raise NotImplementedError

    def signed_url(self, key: str, expires_in: int) -> str:
        raise NotImplementedError

    def exists(self, key: str) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class LocalStorage(Storage):
    root: Path
    base_url: str

    def _path(self, key: str) -> Path:
        return self.root / normalise_key(key)

    def put_bytes(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        p = self._path(key)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)

    def signed_url(self, key: str, expires_in: int) -> str:
        # Local files are served unsigned from /uploads
        return f"{self.base_url.rstrip('/')}/uploads/{quote(normalise_key(key))}"

    def exists(self, key: str) -> bool:
        return self._path(key).exists()


@dataclass(frozen=True)
class R2Storage(Storage):
    endpoint: str
    region: str
    bucket: str
    access_key_id: str
    secret_access_key: str

    def _client(self):
        import boto3

        return boto3.client(
            "s3",
            endpoint_url=self.endpoint,
            region_name=self.region or "auto",
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
        )

    def put_bytes(self, key: str, data: bytes, *, content_type: str | None = None) -> None:
        extra: dict[str, object] = {}
        if content_type:
            extra["ContentType"] = content_type
        self._client().put_object(Bucket=self.bucket, Key=normalise_key(key), Body=data, **extra)

    def signed_url(self, key: str, expires_in: int) -> str:
        return self._client().generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": normalise_key(key)},
            ExpiresIn=expires_in,
        )

    def exists(self, key: str) -> bool:
        from botocore.exceptions import ClientError

        try:
            self._client().head_object(Bucket=self.bucket, Key=normalise_key(key))
            return True
        except ClientError:
            return False


def _r2_endpoint() -> str:
    if settings.R2_ENDPOINT:
        return settings.R2_ENDPOINT
    if settings.R2_ACCOUNT_ID:
        return f"https://{settings.R2_ACCOUNT_ID}.r2.cloudflarestorage.com"
    return ""


def storage_from_settings() -> Storage:
    backend = (settings.STORAGE_BACKEND or "local").strip().lower()
    if backend == "r2":
        endpoint = _r2_endpoint()
        if not endpoint or not settings.R2_BUCKET_NAME:
            raise StorageError("R2 storage not configured (R2_ENDPOINT/R2_ACCOUNT_ID, R2_BUCKET_NAME)")
        return R2Storage(
            endpoint=endpoint,
            region=settings.R2_REGION,
            bucket=settings.R2_BUCKET_NAME,
            access_key_id=settings.R2_ACCESS_KEY_ID,
            secret_access_key=settings.R2_SECRET_ACCESS_KEY,
        )
    return LocalStorage(root=Path(settings.UPLOAD_DIR), base_url=settings.PUBLIC_BASE_URL)
