"""PDF merge and HTML-to-PDF blueprint."""

from flask import Blueprint

pdf_tools_bp = Blueprint('pdf_tools', __name__)

from . import routes  # noqa: E402,F401
