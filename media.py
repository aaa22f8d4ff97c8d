"""
Uploads to the media host (Cloudinary, unsigned preset).

The admin forms post a file, it lands in a folder under the configured
cloud, and the returned secure url goes straight into the record being
edited.
"""

import logging
from typing import BinaryIO, Dict, Optional, Union

import requests

from config import CLOUDINARY_CLOUD_NAME, CLOUDINARY_UPLOAD_PRESET, HTTP_TIMEOUT

logger = logging.getLogger(__name__)

UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/auto/upload"

PROJECTS_FOLDER = "portfolio/projects"
TESTIMONIALS_FOLDER = "portfolio/testimonials"
PROFILE_FOLDER = "portfolio/profile"


class MediaConfigError(RuntimeError):
    pass


class MediaUploadError(RuntimeError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Cloudinary upload failed: {status_code} {body}")


def upload_image(
    file: Union[bytes, BinaryIO],
    filename: str,
    content_type: Optional[str] = None,
    folder: Optional[str] = None,
    upload_preset: Optional[str] = None,
    cloud_name: Optional[str] = None,
) -> Dict[str, str]:
    cloud_name = cloud_name or CLOUDINARY_CLOUD_NAME
    upload_preset = upload_preset or CLOUDINARY_UPLOAD_PRESET
    if not cloud_name or not upload_preset:
        raise MediaConfigError(
            "Missing Cloudinary config. Set CLOUDINARY_CLOUD_NAME and CLOUDINARY_UPLOAD_PRESET."
        )

    data = {"upload_preset": upload_preset}
    if folder:
        data["folder"] = folder
    files = {"file": (filename, file, content_type or "application/octet-stream")}

    resp = requests.post(UPLOAD_URL.format(cloud_name=cloud_name), data=data, files=files, timeout=HTTP_TIMEOUT)
    if not resp.ok:
        logger.error("Upload of %s failed with %s", filename, resp.status_code)
        raise MediaUploadError(resp.status_code, resp.text)

    try:
        body = resp.json()
        result = {"url": body["secure_url"], "public_id": body["public_id"]}
    except (ValueError, KeyError, TypeError):
        logger.error("Upload of %s returned an unexpected body", filename)
        raise MediaUploadError(resp.status_code, resp.text)
    logger.info("Uploaded %s as %s", filename, result["public_id"])
    return result
