"""Common schemas shared by request and response bodies"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase JSON."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class UploadInfo(CamelModel):
    """Presigned URL upload information"""
    presigned_url: str
    s3_key: str
    expires_in_seconds: int = 3600
