from __future__ import annotations

import math
from typing import Optional

from flask import jsonify

from officetools.domain.bmi import (
    HEIGHT_FACTORS,
    NORMAL_MIN,
    OBESE_MIN,
    OVERWEIGHT_MIN,
    WEIGHT_FACTORS,
    BMIInput,
    calculate_bmi,
)
from officetools.domain.errors import ToolInputError
from officetools.utils.payloads import request_data, text_field
from . import bmi_calculator_bp

WEIGHT_UNIT_LABELS = {
    'kg': 'Kilograms (kg)',
    'lb': 'Pounds (lb)',
}

HEIGHT_UNIT_LABELS = {
    'cm': 'Centimeters (cm)',
    'm': 'Meters (m)',
    'ft': 'Feet (ft)',
    'in': 'Inches (in)',
}


@bmi_calculator_bp.route('/', methods=['GET'])
def index():
    """Units and category bands used by the calculator form."""
    return jsonify({
        'weight_units': [{'value': k, 'label': WEIGHT_UNIT_LABELS[k]} for k in WEIGHT_FACTORS],
        'height_units': [{'value': k, 'label': HEIGHT_UNIT_LABELS[k]} for k in HEIGHT_FACTORS],
        'categories': [
            {'label': 'Underweight', 'range': f'< {NORMAL_MIN}'},
            {'label': 'Normal weight', 'range': f'{NORMAL_MIN} - {OVERWEIGHT_MIN - 0.1:.1f}'},
            {'label': 'Overweight', 'range': f'{OVERWEIGHT_MIN:g} - {OBESE_MIN - 0.1:.1f}'},
            {'label': 'Obese', 'range': f'>= {OBESE_MIN:g}'},
        ],
    })


@bmi_calculator_bp.route('/', methods=['POST'])
def calculate():
    data = request_data()

    weight_unit = text_field(data, 'weight_unit') or 'kg'
    height_unit = text_field(data, 'height_unit') or 'cm'
    if weight_unit not in WEIGHT_FACTORS:
        raise ToolInputError(f'Unsupported weight unit: {weight_unit}')
    if height_unit not in HEIGHT_FACTORS:
        raise ToolInputError(f'Unsupported height unit: {height_unit}')

    result = calculate_bmi(BMIInput(
        weight=_parse_float(data.get('weight')),
        height=_parse_float(data.get('height')),
        weight_unit=weight_unit,
        height_unit=height_unit,
    ))

    payload = result.to_dict()
    payload['message'] = f"Your BMI is {result.bmi:.1f} ({result.category})"
    return jsonify(payload)


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
