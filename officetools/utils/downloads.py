"""Attachment responses with literal, timestamped filenames."""

from __future__ import annotations

import time
from typing import Optional

from flask import make_response


def timestamp_ms(now: Optional[float] = None) -> int:
    return int((time.time() if now is None else now) * 1000)


def timestamped_filename(prefix: str, extension: str, now: Optional[float] = None) -> str:
    """``tts-script-`` + ``txt`` -> ``tts-script-1700000000000.txt``."""
    return f'{prefix}{timestamp_ms(now)}.{extension}'


def attachment_response(payload: bytes | str, filename: str, content_type: str):
    response = make_response(payload)
    response.headers['Content-Type'] = content_type
    response.headers['Content-Disposition'] = f'attachment; filename="{filename}"'
    response.headers['Cache-Control'] = 'no-store'
    return response
