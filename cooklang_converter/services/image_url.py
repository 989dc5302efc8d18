"""Image URL naming for recipe pictures."""
from __future__ import annotations

from typing import Any

import voluptuous as vol

from ..const import DEFAULT_IMAGE_EXTENSION, IMAGE_EXTENSIONS

IMAGE_URL_OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional("step"): vol.Any(None, int),
        vol.Optional("extension", default=DEFAULT_IMAGE_EXTENSION): vol.In(IMAGE_EXTENSIONS),
    }
)


def get_image_url(name: str, step: int | None = None, extension: str = DEFAULT_IMAGE_EXTENSION) -> str:
    """Create the image file name for a recipe or one of its steps.

    Args:
        name: Name of the .cook file, without extension
        step: Optional step number the picture belongs to
        extension: Image extension, 'png' or 'jpg'

    Returns:
        The image URL, e.g. 'Baked Potato.2.jpg'

    Raises:
        voluptuous.Invalid: If step is not an integer or the extension is unknown

    Examples:
        >>> get_image_url('Baked Potato', step=2, extension='jpg')
        'Baked Potato.2.jpg'
        >>> get_image_url('Baked Potato')
        'Baked Potato.png'
    """
    options: dict[str, Any] = IMAGE_URL_OPTIONS_SCHEMA(
        {"step": step, "extension": extension})

    url = name
    if options["step"] is not None:
        url += f".{options['step']}"
    return f"{url}.{options['extension']}"
