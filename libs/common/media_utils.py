"""Image path helpers.

Product images are stored as paths relative to the uploads directory (legacy
rows may still carry a leading ``uploads/`` or ``/uploads/`` segment) or as
inline ``data:`` URIs. These helpers normalise both for display.
"""

import re
from typing import Optional

from libs.common.config import get_settings

_UPLOADS_PREFIX = re.compile(r"^/?uploads/")


def clean_image_path(path: Optional[str]) -> Optional[str]:
    """Strip a leading ``uploads/`` segment. Empty input yields None."""
    if not path:
        return None
    return _UPLOADS_PREFIX.sub("", path, count=1)


def resolve_image_url(path: Optional[str]) -> Optional[str]:
    """
    Build the public URL for a stored image path.

    Inline data URIs and absolute URLs are returned unchanged.
    """
    clean = clean_image_path(path)
    if clean is None:
        return None
    if clean.startswith(("data:", "http://", "https://")):
        return clean
    prefix = get_settings().UPLOADS_URL_PREFIX.rstrip("/")
    return f"{prefix}/{clean}"
