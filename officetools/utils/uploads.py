"""Shared helpers for safely reading and persisting user uploads."""

from __future__ import annotations

import mimetypes
import os
import uuid
from pathlib import Path
from typing import Optional

from flask import current_app
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from officetools.domain.errors import ToolInputError


# Magic bytes for the image formats the cropper accepts.
IMAGE_SIGNATURES = (
    (b'\xff\xd8\xff', 'image/jpeg'),
    (b'\x89PNG\r\n\x1a\n', 'image/png'),
    (b'GIF87a', 'image/gif'),
    (b'GIF89a', 'image/gif'),
    (b'BM', 'image/bmp'),
)


def sniff_image_type(header: bytes) -> Optional[str]:
    for signature, mime in IMAGE_SIGNATURES:
        if header.startswith(signature):
            return mime
    if header.startswith(b'RIFF') and b'WEBP' in header[:32]:
        return 'image/webp'
    return None


def _max_tool_size() -> int:
    try:
        return int(current_app.config.get('TOOL_UPLOAD_MAX_BYTES') or 0)
    except (TypeError, ValueError):
        return 0


def clean_filename(filename: Optional[str], fallback: str = 'upload') -> str:
    """Sanitize a client filename; never returns an empty string."""
    cleaned = secure_filename(filename or '')
    return cleaned or fallback


def read_upload(file: Optional[FileStorage], *, required_message: str = 'Please select a file') -> tuple[str, bytes]:
    """Read an uploaded file fully into memory after size validation.

    Returns ``(safe_filename, data)``.
    """
    if file is None or not getattr(file, 'filename', None):
        raise ToolInputError(required_message)

    data = file.read()
    limit = _max_tool_size()
    if limit and len(data) > limit:
        raise ToolInputError(
            f'{file.filename} is too large. Maximum size is {limit // (1024 * 1024)}MB.'
        )
    return clean_filename(file.filename), data


def read_image_upload(file: Optional[FileStorage]) -> bytes:
    _, data = read_upload(file, required_message='Please upload an image')
    if sniff_image_type(data[:32]) is None:
        raise ToolInputError('The uploaded file is not a supported image (JPEG, PNG, GIF, BMP or WebP).')
    return data


def save_shared_upload(file: Optional[FileStorage], folder: str) -> dict[str, object]:
    """Persist a shared upload under a random name inside ``folder``.

    Returns the stored filename, the sanitized original name, MIME type and size.
    """
    if file is None or not getattr(file, 'filename', None):
        raise ToolInputError('No file uploaded')

    original_name = clean_filename(file.filename, fallback='file')
    stored_name = uuid.uuid4().hex

    os.makedirs(folder, exist_ok=True)
    destination = Path(folder) / stored_name
    file.save(destination)

    mime_type = (
        file.mimetype
        if file.mimetype and file.mimetype != 'application/octet-stream'
        else mimetypes.guess_type(original_name)[0]
    ) or 'application/octet-stream'

    return {
        'filename': stored_name,
        'original_name': original_name,
        'mime_type': mime_type,
        'file_size': destination.stat().st_size,
    }
