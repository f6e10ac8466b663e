"""Photo cropper blueprint."""

from flask import Blueprint

photo_cropper_bp = Blueprint('photo_cropper', __name__)

from . import routes  # noqa: E402,F401
