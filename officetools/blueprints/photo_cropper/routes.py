from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from flask import current_app, jsonify, request

from officetools.domain.crop import (
    ASPECT_PRESETS,
    DEFAULT_CROP_AREA,
    Container,
    CropArea,
    apply_aspect_ratio,
    clamp_origin,
    drag_offset,
    drag_to,
)
from officetools.domain.errors import ToolInputError
from officetools.services.imaging import crop_image
from officetools.utils.downloads import attachment_response
from officetools.utils.payloads import json_body
from officetools.utils.uploads import read_image_upload
from . import photo_cropper_bp

CROPPED_FILENAME = 'cropped-image.jpg'


@photo_cropper_bp.route('/', methods=['GET'])
def index():
    return jsonify({
        'aspect_ratios': [{'value': p.value, 'label': p.label, 'ratio': p.ratio} for p in ASPECT_PRESETS],
        'default_area': DEFAULT_CROP_AREA.to_dict(),
    })


@photo_cropper_bp.route('/drag', methods=['POST'])
def drag():
    """Replay a pointer drag and return the clamped crop area.

    Body: ``area``, ``container``, ``start`` (pointer at press) and ``moves``
    (pointer positions in order).
    """
    data = json_body()
    area = _parse_area(data.get('area'))
    container = _parse_container(data.get('container'))
    start = _parse_point(data.get('start'), 'start')

    moves = data.get('moves') or []
    if not isinstance(moves, list):
        raise ToolInputError('moves must be a list of points')

    offset = drag_offset(area, start[0], start[1], container)
    for index, move in enumerate(moves):
        x, y = _parse_point(move, f'moves[{index}]')
        area = drag_to(area, x, y, offset, container)

    return jsonify({'area': area.to_dict()})


@photo_cropper_bp.route('/aspect-ratio', methods=['POST'])
def aspect_ratio():
    data = json_body()
    area = _parse_area(data.get('area'))
    container = _parse_container(data.get('container'))
    preset = str(data.get('aspect_ratio') or 'free')

    return jsonify({'aspect_ratio': preset, 'area': apply_aspect_ratio(area, preset, container).to_dict()})


@photo_cropper_bp.route('/', methods=['POST'])
def crop():
    """Crop an uploaded image to the on-screen selection and return a JPEG."""
    image_bytes = read_image_upload(request.files.get('image'))
    form = request.form

    area = _parse_area(form)
    displayed = (
        _require_float(form, 'displayed_width'),
        _require_float(form, 'displayed_height'),
    )
    if form.get('container_width') or form.get('container_height'):
        area = clamp_origin(area, _parse_container({
            'width': form.get('container_width'),
            'height': form.get('container_height'),
        }))

    output = crop_image(image_bytes, area, displayed)
    current_app.logger.info('Cropped image to %dx%d selection (%d bytes)', area.width, area.height, len(output))
    return attachment_response(output, CROPPED_FILENAME, 'image/jpeg')


def _parse_float(value) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _require_float(data: Mapping[str, Any], key: str) -> float:
    value = _parse_float(data.get(key))
    if value is None:
        raise ToolInputError(f'{key} must be a number')
    return value


def _parse_area(data: Optional[Mapping[str, Any]]) -> CropArea:
    if not data:
        return DEFAULT_CROP_AREA
    if not isinstance(data, Mapping):
        raise ToolInputError('area must have x, y, width and height')
    area = CropArea(
        x=_require_float(data, 'x'),
        y=_require_float(data, 'y'),
        width=_require_float(data, 'width'),
        height=_require_float(data, 'height'),
    )
    if area.width <= 0 or area.height <= 0:
        raise ToolInputError('Crop area must have a positive size')
    return area


def _parse_container(data: Optional[Mapping[str, Any]]) -> Container:
    if not data:
        raise ToolInputError('Container size is required')
    if not isinstance(data, Mapping):
        raise ToolInputError('Container size must have width and height')
    container = Container(
        width=_require_float(data, 'width'),
        height=_require_float(data, 'height'),
        left=_parse_float(data.get('left')) or 0.0,
        top=_parse_float(data.get('top')) or 0.0,
    )
    if container.width <= 0 or container.height <= 0:
        raise ToolInputError('Container size must be positive')
    return container


def _parse_point(data, label: str) -> tuple[float, float]:
    if not isinstance(data, Mapping):
        raise ToolInputError(f'{label} must have x and y')
    return _require_float(data, 'x'), _require_float(data, 'y')
