"""Crop-area geometry for the photo cropper.

All coordinates are on-screen pixels relative to the preview container's
top-left corner until :func:`to_source_box` maps them into the image's
natural pixel space.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from officetools.domain.errors import ToolInputError


@dataclass(frozen=True)
class CropArea:
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict[str, float]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class Container:
    width: float
    height: float
    left: float = 0.0
    top: float = 0.0


@dataclass(frozen=True)
class AspectPreset:
    value: str
    label: str
    ratio: Optional[float]


DEFAULT_CROP_AREA = CropArea(x=50, y=50, width=200, height=200)

PRESET_SIZE = 200
CONTAINER_MARGIN = 100

ASPECT_PRESETS: tuple[AspectPreset, ...] = (
    AspectPreset('free', 'Free Form', None),
    AspectPreset('1:1', 'Square (1:1)', 1),
    AspectPreset('4:3', 'Standard (4:3)', 4 / 3),
    AspectPreset('3:4', 'Portrait (3:4)', 3 / 4),
    AspectPreset('16:9', 'Widescreen (16:9)', 16 / 9),
    AspectPreset('9:16', 'Vertical (9:16)', 9 / 16),
    AspectPreset('3:2', 'Photo (3:2)', 3 / 2),
    AspectPreset('2:3', 'Photo Portrait (2:3)', 2 / 3),
)

_PRESETS_BY_VALUE = {preset.value: preset for preset in ASPECT_PRESETS}


def _clamp(value: float, low: float, high: float) -> float:
    # A rectangle wider than its container pins to the left/top edge.
    return max(low, min(value, high))


def get_preset(value: str) -> AspectPreset:
    preset = _PRESETS_BY_VALUE.get(value)
    if preset is None:
        raise ToolInputError(f'Unknown aspect ratio: {value}')
    return preset


def clamp_origin(area: CropArea, container: Container) -> CropArea:
    return replace(
        area,
        x=_clamp(area.x, 0, container.width - area.width),
        y=_clamp(area.y, 0, container.height - area.height),
    )


def drag_offset(area: CropArea, pointer_x: float, pointer_y: float, container: Container) -> tuple[float, float]:
    """Pointer position inside the crop rectangle when a drag starts."""
    return (
        pointer_x - container.left - area.x,
        pointer_y - container.top - area.y,
    )


def drag_to(
    area: CropArea,
    pointer_x: float,
    pointer_y: float,
    offset: tuple[float, float],
    container: Container,
) -> CropArea:
    """Move the rectangle to follow the pointer, keeping it inside the container."""
    raw_x = pointer_x - container.left - offset[0]
    raw_y = pointer_y - container.top - offset[1]
    return clamp_origin(replace(area, x=raw_x, y=raw_y), container)


def apply_aspect_ratio(area: CropArea, preset_value: str, container: Container) -> CropArea:
    """Resize the rectangle to a preset ratio, fitted inside the container margin."""
    preset = get_preset(preset_value)
    if preset.ratio is None:
        return area

    max_width = container.width - CONTAINER_MARGIN
    max_height = container.height - CONTAINER_MARGIN
    if max_width <= 0 or max_height <= 0:
        raise ToolInputError('Preview area is too small for this aspect ratio')

    width = min(PRESET_SIZE, max_width)
    height = width / preset.ratio
    if height > max_height:
        height = max_height
        width = height * preset.ratio

    return clamp_origin(replace(area, width=width, height=height), container)


def to_source_box(
    area: CropArea,
    natural_size: tuple[int, int],
    displayed_size: tuple[float, float],
) -> tuple[int, int, int, int]:
    """Map the on-screen rectangle into the image's natural pixel space.

    Returns a ``(left, upper, right, lower)`` box clipped to the image.
    """
    natural_w, natural_h = natural_size
    displayed_w, displayed_h = displayed_size
    if displayed_w <= 0 or displayed_h <= 0:
        raise ToolInputError('Displayed image size must be positive')
    if area.width <= 0 or area.height <= 0:
        raise ToolInputError('Crop area must have a positive size')

    scale_x = natural_w / displayed_w
    scale_y = natural_h / displayed_h

    left = int(round(area.x * scale_x))
    upper = int(round(area.y * scale_y))
    right = int(round((area.x + area.width) * scale_x))
    lower = int(round((area.y + area.height) * scale_y))

    left = int(_clamp(left, 0, natural_w))
    upper = int(_clamp(upper, 0, natural_h))
    right = int(_clamp(right, left, natural_w))
    lower = int(_clamp(lower, upper, natural_h))
    if right == left or lower == upper:
        raise ToolInputError('Crop area lies outside the image')
    return left, upper, right, lower
