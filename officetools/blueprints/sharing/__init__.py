"""File and text sharing API blueprint."""

from flask import Blueprint

sharing_bp = Blueprint('sharing', __name__)

from . import routes  # noqa: E402,F401
