"""File and text sharing with optional expiry and access limits."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.datastructures import FileStorage

from officetools.domain.errors import ShareUnavailable, ToolInputError
from officetools.extensions import db
from officetools.models import SharedFile, SharedText
from officetools.utils.uploads import save_shared_upload

logger = logging.getLogger(__name__)


def parse_positive_int(value, field: str) -> Optional[int]:
    """Blank means "no limit"; anything else must be a positive integer."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ToolInputError(f'{field} must be a whole number')
    if number <= 0:
        raise ToolInputError(f'{field} must be greater than zero')
    return number


def _expiry_from_hours(expires_in, now: Optional[datetime] = None) -> Optional[datetime]:
    hours = parse_positive_int(expires_in, 'expiresIn')
    if hours is None:
        return None
    return (now or datetime.utcnow()) + timedelta(hours=hours)


def _check_access(item, noun: str, limit_message: str) -> None:
    if item.is_expired():
        raise ShareUnavailable(f'{noun} has expired', 410)
    if item.limit_reached():
        raise ShareUnavailable(limit_message, 403)


# ---- Files ----

def file_path(folder: str, shared: SharedFile) -> Path:
    return Path(folder) / shared.filename


def create_shared_file(
    file: Optional[FileStorage],
    folder: str,
    max_downloads=None,
    expires_in=None,
) -> SharedFile:
    limit = parse_positive_int(max_downloads, 'maxDownloads')
    expires_at = _expiry_from_hours(expires_in)

    stored = save_shared_upload(file, folder)
    shared = SharedFile(
        filename=stored['filename'],
        original_name=stored['original_name'],
        mime_type=stored['mime_type'],
        file_size=stored['file_size'],
        expires_at=expires_at,
        max_downloads=limit,
        is_public=True,
    )
    db.session.add(shared)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        (Path(folder) / stored['filename']).unlink(missing_ok=True)
        logger.error('Could not record shared file %s; removed stored upload', stored['original_name'], exc_info=True)
        raise
    logger.info('Shared file %s stored as %s (%d bytes)', shared.original_name, shared.filename, shared.file_size)
    return shared


def list_shared_files() -> List[SharedFile]:
    return SharedFile.query.order_by(SharedFile.uploaded_at.desc()).all()


def get_shared_file(file_id: str) -> SharedFile:
    shared = db.session.get(SharedFile, file_id)
    if shared is None:
        raise ShareUnavailable('File not found', 404)
    return shared


def get_accessible_file(file_id: str) -> SharedFile:
    shared = get_shared_file(file_id)
    _check_access(shared, 'File', 'Download limit reached')
    return shared


def open_for_download(file_id: str, folder: str) -> tuple[SharedFile, Path]:
    """Validate access, bump the download counter and return the file on disk."""
    shared = get_accessible_file(file_id)
    path = file_path(folder, shared)
    if not path.exists():
        raise ShareUnavailable('File not found on disk', 404)

    shared.download_count = (shared.download_count or 0) + 1
    db.session.commit()
    return shared, path


def delete_shared_file(file_id: str, folder: str) -> None:
    shared = get_shared_file(file_id)
    path = file_path(folder, shared)
    if path.exists():
        path.unlink()
    db.session.delete(shared)
    db.session.commit()


# ---- Texts ----

def create_shared_text(title: str, content: str, max_views=None, expires_in=None) -> SharedText:
    if not (title or '').strip() or not (content or '').strip():
        raise ToolInputError('Title and content are required')

    shared = SharedText(
        title=title.strip(),
        content=content,
        expires_at=_expiry_from_hours(expires_in),
        max_views=parse_positive_int(max_views, 'maxDownloads'),
        is_public=True,
    )
    db.session.add(shared)
    db.session.commit()
    return shared


def list_shared_texts() -> List[SharedText]:
    return SharedText.query.order_by(SharedText.uploaded_at.desc()).all()


def get_shared_text(text_id: str) -> SharedText:
    shared = db.session.get(SharedText, text_id)
    if shared is None:
        raise ShareUnavailable('Text not found', 404)
    return shared


def get_accessible_text(text_id: str) -> SharedText:
    shared = get_shared_text(text_id)
    _check_access(shared, 'Text', 'View limit reached')
    return shared


def record_text_view(text_id: str) -> SharedText:
    shared = get_accessible_text(text_id)
    shared.view_count = (shared.view_count or 0) + 1
    db.session.commit()
    return shared


def delete_shared_text(text_id: str) -> None:
    shared = get_shared_text(text_id)
    db.session.delete(shared)
    db.session.commit()


def purge_expired(folder: str, now: Optional[datetime] = None) -> tuple[int, int]:
    """Delete expired shares and their files. Returns ``(files, texts)`` removed."""
    now = now or datetime.utcnow()

    expired_files = SharedFile.query.filter(SharedFile.expires_at.isnot(None), SharedFile.expires_at < now).all()
    for shared in expired_files:
        path = file_path(folder, shared)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning('Could not remove expired upload %s: %s', path, exc)
        db.session.delete(shared)

    expired_texts = SharedText.query.filter(SharedText.expires_at.isnot(None), SharedText.expires_at < now).all()
    for shared in expired_texts:
        db.session.delete(shared)

    db.session.commit()
    return len(expired_files), len(expired_texts)
