from __future__ import annotations

from io import BytesIO

from PIL import Image, ImageOps, UnidentifiedImageError

from officetools.domain.crop import CropArea, to_source_box
from officetools.domain.errors import ToolInputError

JPEG_QUALITY = 90


def _open_image(data: bytes) -> Image.Image:
    if not data:
        raise ToolInputError('Please upload an image')
    try:
        img = Image.open(BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ToolInputError('The uploaded image could not be read') from exc
    # Honour camera orientation so the preview and the crop agree.
    return ImageOps.exif_transpose(img)


def crop_image(data: bytes, area: CropArea, displayed_size: tuple[float, float]) -> bytes:
    """Crop ``data`` to the on-screen ``area`` and return JPEG bytes."""
    with _open_image(data) as img:
        box = to_source_box(area, img.size, displayed_size)
        cropped = img.crop(box)
        if cropped.mode != 'RGB':
            # JPEG has no alpha; flatten onto white like a canvas export.
            background = Image.new('RGB', cropped.size, (255, 255, 255))
            rgba = cropped.convert('RGBA')
            background.paste(rgba, mask=rgba.split()[-1])
            cropped = background

        out = BytesIO()
        cropped.save(out, format='JPEG', quality=JPEG_QUALITY)
        return out.getvalue()
