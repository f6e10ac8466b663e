"""Text-to-speech settings and export blueprint."""

from flask import Blueprint

text_to_speech_bp = Blueprint('text_to_speech', __name__)

from . import routes  # noqa: E402,F401
