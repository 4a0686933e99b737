"""S3 service for presigned media uploads, downloads and deletes"""

import logging
import os
from typing import Optional
from uuid import uuid4

import aioboto3
from botocore.config import Config
from botocore.exceptions import ClientError

from app.services.s3.s3_config import S3Settings

logger = logging.getLogger(__name__)


class S3Service:
    """Browser-direct media storage.

    The API never streams file bytes: clients upload and download through
    presigned URLs, the service only signs them and removes objects.
    """

    def __init__(self):
        self._session = None
        self._config = None
        self._cached_access_key = None

    def _get_settings(self) -> S3Settings:
        """Read settings at call time so env vars loaded after import apply."""
        return S3Settings()

    def _get_session(self):
        settings = self._get_settings()
        access_key = settings.AWS_ACCESS_KEY_ID

        # Rebuild the session when credentials rotate
        if self._session is None or self._cached_access_key != access_key:
            self._session = aioboto3.Session(
                aws_access_key_id=access_key,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=settings.AWS_REGION,
            )
            self._cached_access_key = access_key
            self._config = Config(
                region_name=settings.AWS_REGION,
                signature_version="s3v4",
                retries={"max_attempts": 3, "mode": "adaptive"},
            )
            logger.info(
                f"S3 session initialized with access key: {access_key[:8]}..."
                if access_key
                else "S3 session initialized with empty credentials"
            )

        return self._session, self._config

    @property
    def bucket_name(self) -> str:
        return self._get_settings().BUCKET_NAME

    @property
    def presigned_url_expiration(self) -> int:
        return self._get_settings().PRESIGNED_URL_EXPIRATION

    async def generate_presigned_url(
        self, s3_key: str, expiration: Optional[int] = None
    ) -> Optional[str]:
        """
        Generate a pre-signed GET URL for a stored object

        Args:
            s3_key: S3 key of the file
            expiration: URL lifetime in seconds (settings default when omitted)

        Returns:
            Pre-signed URL string, or None if signing fails
        """
        if expiration is None:
            expiration = self.presigned_url_expiration

        try:
            session, config = self._get_session()
            async with session.client("s3", config=config) as s3_client:
                url = await s3_client.generate_presigned_url(
                    "get_object",
                    Params={"Bucket": self.bucket_name, "Key": s3_key},
                    ExpiresIn=expiration,
                )
                logger.debug(f"Generated pre-signed URL for {s3_key}")
                return url

        except ClientError as e:
            logger.error(f"Failed to generate pre-signed URL for {s3_key}: {e}", exc_info=True)
            return None

    async def generate_presigned_upload_url(
        self,
        s3_key: str,
        content_type: Optional[str] = None,
        expiration: Optional[int] = None,
    ) -> Optional[str]:
        """
        Generate a pre-signed PUT URL the browser uploads to

        Args:
            s3_key: S3 key where the file will be stored
            content_type: MIME type the upload must be sent with
            expiration: URL lifetime in seconds (settings default when omitted)

        Returns:
            Pre-signed URL string, or None if signing fails
        """
        if expiration is None:
            expiration = self.presigned_url_expiration

        try:
            session, config = self._get_session()
            async with session.client("s3", config=config) as s3_client:
                params = {"Bucket": self.bucket_name, "Key": s3_key}
                if content_type:
                    params["ContentType"] = content_type

                url = await s3_client.generate_presigned_url(
                    "put_object",
                    Params=params,
                    ExpiresIn=expiration,
                )
                logger.debug(f"Generated pre-signed upload URL for {s3_key}")
                return url

        except ClientError as e:
            logger.error(
                f"Failed to generate pre-signed upload URL for {s3_key}: {e}", exc_info=True
            )
            return None

    async def delete_file(self, s3_key: str) -> bool:
        """Delete an object. Returns False when S3 refuses."""
        try:
            session, config = self._get_session()
            async with session.client("s3", config=config) as s3_client:
                await s3_client.delete_object(Bucket=self.bucket_name, Key=s3_key)
                logger.info(f"Deleted {s3_key} from S3")
                return True

        except ClientError as e:
            logger.error(f"Failed to delete {s3_key} from S3: {e}", exc_info=True)
            return False

    def generate_s3_key(self, user_id: str, filename: str) -> str:
        """
        Build the object key for a new upload.

        Returns:
            ``{prefix}/{user_id}/{random}{ext}``; the extension of the original
            filename is kept, the rest of the name is not.
        """
        ext = os.path.splitext(filename)[1].lower()
        return f"{self._get_settings().MEDIA_PREFIX}/{user_id}/{uuid4().hex}{ext}"


s3_service = S3Service()
