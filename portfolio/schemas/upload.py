"""Response schema for the image upload endpoint."""

from pydantic import Field

from portfolio.schemas.common import CamelModel


class UploadResponse(CamelModel):
    """Public URL of the stored image."""

    image_url: str = Field(..., description="Path under /uploads where the image is served")
