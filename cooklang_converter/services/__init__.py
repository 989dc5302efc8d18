"""Services package."""
from .image_url import get_image_url
from .serializer import format_quantity, serialize

__all__ = ["format_quantity", "get_image_url", "serialize"]
