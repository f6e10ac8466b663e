from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from officetools.domain.errors import ToolInputError


@dataclass(frozen=True)
class BMIInput:
    weight: Optional[float]
    height: Optional[float]
    weight_unit: str = 'kg'
    height_unit: str = 'cm'


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: str
    progress: float
    weight_kg: float
    height_m: float

    def to_dict(self) -> dict[str, float | str]:
        return {
            'bmi': round(self.bmi, 1),
            'bmi_exact': self.bmi,
            'category': self.category,
            'progress': round(self.progress, 2),
            'weight_kg': round(self.weight_kg, 3),
            'height_m': round(self.height_m, 4),
        }


# ---- Conversion factors ----
POUND_TO_KG = 0.453592
FOOT_TO_M = 0.3048
INCH_TO_M = 0.0254

WEIGHT_FACTORS = {
    'kg': 1.0,
    'lb': POUND_TO_KG,
}

HEIGHT_FACTORS = {
    'm': 1.0,
    'cm': 0.01,
    'ft': FOOT_TO_M,
    'in': INCH_TO_M,
}

# ---- Category thresholds (lower bound inclusive) ----
UNDERWEIGHT = 'Underweight'
NORMAL = 'Normal weight'
OVERWEIGHT = 'Overweight'
OBESE = 'Obese'

NORMAL_MIN = 18.5
OVERWEIGHT_MIN = 25.0
OBESE_MIN = 30.0


def to_kilograms(weight: float, unit: str) -> float:
    factor = WEIGHT_FACTORS.get(unit)
    if factor is None:
        raise ToolInputError(f'Unsupported weight unit: {unit}')
    return weight * factor


def to_meters(height: float, unit: str) -> float:
    if unit == 'cm':
        return height / 100
    factor = HEIGHT_FACTORS.get(unit)
    if factor is None:
        raise ToolInputError(f'Unsupported height unit: {unit}')
    return height * factor


def classify(bmi: float) -> str:
    if bmi < NORMAL_MIN:
        return UNDERWEIGHT
    if bmi < OVERWEIGHT_MIN:
        return NORMAL
    if bmi < OBESE_MIN:
        return OVERWEIGHT
    return OBESE


def progress(bmi: float) -> float:
    """Map a BMI onto a 0-100 gauge, one quarter per category band."""
    if not bmi:
        return 0.0
    if bmi < NORMAL_MIN:
        return (bmi / NORMAL_MIN) * 25
    if bmi < OVERWEIGHT_MIN:
        return 25 + ((bmi - NORMAL_MIN) / (OVERWEIGHT_MIN - NORMAL_MIN)) * 25
    if bmi < OBESE_MIN:
        return 50 + ((bmi - OVERWEIGHT_MIN) / (OBESE_MIN - OVERWEIGHT_MIN)) * 25
    return min(100.0, 75 + ((bmi - OBESE_MIN) / 10) * 25)


def calculate_bmi(data: BMIInput) -> BMIResult:
    if data.weight is None or data.height is None:
        raise ToolInputError('Please enter both weight and height')
    if data.weight <= 0 or data.height <= 0:
        raise ToolInputError('Please enter valid positive numbers')

    weight_kg = to_kilograms(data.weight, data.weight_unit)
    height_m = to_meters(data.height, data.height_unit)

    bmi = weight_kg / (height_m * height_m)
    return BMIResult(
        bmi=bmi,
        category=classify(bmi),
        progress=progress(bmi),
        weight_kg=weight_kg,
        height_m=height_m,
    )
