"""File compressor blueprint."""

from flask import Blueprint

file_compressor_bp = Blueprint('file_compressor', __name__)

from . import routes  # noqa: E402,F401
