import base64
import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union

from wheel_shared.constants import IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)


def is_image_path(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower().lstrip(".") in IMAGE_EXTENSIONS


def read_file_base64(path: Union[str, Path]) -> Optional[str]:
    """Return the file's bytes base64-encoded, or None if it can't be read."""
    try:
        data = Path(path).read_bytes()
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None
    return base64.b64encode(data).decode("ascii")


def to_data_uri(path: Union[str, Path]) -> Optional[str]:
    """Embed a local image as a data URI; None for unreadable or non-image files."""
    if not is_image_path(path):
        logger.warning("Not an image file: %s", path)
        return None
    encoded = read_file_base64(path)
    if encoded is None:
        return None
    mime = mimetypes.guess_type(str(path))[0] or "image/png"
    return f"data:{mime};base64,{encoded}"
