"""BMI calculator blueprint."""

from flask import Blueprint

bmi_calculator_bp = Blueprint('bmi_calculator', __name__)

from . import routes  # noqa: E402,F401
