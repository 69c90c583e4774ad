# pagebinder/utils/__init__.py
# ============================================================
# Shared Utilities Package
# ============================================================
#   - logger: Rich-formatted logging
#   - image:  Pillow open / size / encode helpers
# ============================================================

from pagebinder.utils.logger import get_logger, set_log_level
from pagebinder.utils.image import encode_image, image_size, open_image

__all__ = [
    "get_logger",
    "set_log_level",
    "encode_image",
    "image_size",
    "open_image",
]
