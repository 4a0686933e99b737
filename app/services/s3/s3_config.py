"""AWS S3 configuration for user media"""

from pydantic_settings import BaseSettings

from app.utils.constants import PRESIGNED_URL_EXPIRATION


class S3Settings(BaseSettings):
    """S3 bucket and credentials, read from ``S3_*`` environment variables"""

    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    BUCKET_NAME: str = ""
    PRESIGNED_URL_EXPIRATION: int = PRESIGNED_URL_EXPIRATION
    MEDIA_PREFIX: str = "media"

    class Config:
        env_prefix = "S3_"
        env_file = ".env"
        extra = "ignore"


s3_settings = S3Settings()
