"""
Database Models for the Office Tools Application

This module defines all database models using SQLAlchemy ORM.
Models include User, Tool, ToolUsage, Bookmark, SharedFile and SharedText.
"""

import uuid
from datetime import datetime

from werkzeug.security import generate_password_hash, check_password_hash

from officetools.extensions import db


def _generate_id():
    return str(uuid.uuid4())


class User(db.Model):
    """User model for usage tracking and bookmarks"""

    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=_generate_id)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column('password', db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    usage = db.relationship('ToolUsage', backref='user', lazy='dynamic')
    bookmarks = db.relationship('Bookmark', backref='user', lazy='dynamic', cascade='all, delete-orphan')

    def set_password(self, password):
        """Hash and set user password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Verify password against stored hash."""
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username}>'


class Tool(db.Model):
    """Persisted copy of a registry tool with its bookmark/usage counters"""

    __tablename__ = 'tools'

    id = db.Column(db.String(64), primary_key=True, default=_generate_id)
    name = db.Column(db.String(120), nullable=False)
    category = db.Column(db.String(40), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(80), nullable=False)
    is_bookmarked = db.Column(db.Boolean, default=False)
    usage_count = db.Column(db.Integer, default=0, nullable=False)
    last_used = db.Column(db.DateTime)

    usage = db.relationship('ToolUsage', backref='tool', lazy='dynamic', cascade='all, delete-orphan')
    bookmarks = db.relationship('Bookmark', backref='tool', lazy='dynamic', cascade='all, delete-orphan')

    @classmethod
    def from_definition(cls, definition):
        return cls(
            id=definition.id,
            name=definition.name,
            category=definition.category,
            description=definition.description,
            icon=definition.icon,
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'description': self.description,
            'icon': self.icon,
            'isBookmarked': bool(self.is_bookmarked),
            'usageCount': self.usage_count or 0,
            'lastUsed': self.last_used.isoformat() if self.last_used else None,
        }

    def __repr__(self):
        return f'<Tool {self.id}>'


class ToolUsage(db.Model):
    """One recorded use of a tool"""

    __tablename__ = 'tool_usage'

    id = db.Column(db.String(36), primary_key=True, default=_generate_id)
    tool_id = db.Column(db.String(64), db.ForeignKey('tools.id', ondelete='CASCADE'), index=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id', ondelete='SET NULL'), index=True)
    used_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    # "metadata" is reserved on declarative models.
    usage_metadata = db.Column('metadata', db.JSON)

    def to_dict(self):
        return {
            'id': self.id,
            'toolId': self.tool_id,
            'userId': self.user_id,
            'usedAt': self.used_at.isoformat() if self.used_at else None,
            'metadata': self.usage_metadata,
        }


class Bookmark(db.Model):
    """A user's bookmarked tool"""

    __tablename__ = 'bookmarks'
    __table_args__ = (
        db.UniqueConstraint('tool_id', 'user_id', name='uq_bookmarks_tool_user'),
    )

    id = db.Column(db.String(36), primary_key=True, default=_generate_id)
    tool_id = db.Column(db.String(64), db.ForeignKey('tools.id', ondelete='CASCADE'), index=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id', ondelete='CASCADE'), index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'toolId': self.tool_id,
            'userId': self.user_id,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }


class _ShareMixin:
    """Expiry and access-limit rules shared by files and texts."""

    def is_expired(self, now=None):
        now = now or datetime.utcnow()
        return bool(self.expires_at and now > self.expires_at)

    def limit_reached(self):
        limit = self.access_limit
        return bool(limit and (self.access_count or 0) >= limit)


class SharedFile(_ShareMixin, db.Model):
    """Uploaded file available through a share link"""

    __tablename__ = 'shared_files'

    id = db.Column(db.String(36), primary_key=True, default=_generate_id)
    filename = db.Column(db.String(255), nullable=False)
    original_name = db.Column(db.String(255), nullable=False)
    mime_type = db.Column(db.String(120), nullable=False)
    file_size = db.Column(db.Integer, nullable=False)
    uploaded_at = db.Column(db.DateTime, default=datetime.utcnow)
    expires_at = db.Column(db.DateTime, index=True)
    download_count = db.Column(db.Integer, default=0, nullable=False)
    max_downloads = db.Column(db.Integer)
    is_public = db.Column(db.Boolean, default=True)

    @property
    def access_count(self):
        return self.download_count

    @property
    def access_limit(self):
        return self.max_downloads

    def to_dict(self):
        return {
            'id': self.id,
            'filename': self.filename,
            'originalName': self.original_name,
            'mimeType': self.mime_type,
            'fileSize': self.file_size,
            'uploadedAt': self.uploaded_at.isoformat() if self.uploaded_at else None,
            'expiresAt': self.expires_at.isoformat() if self.expires_at else None,
            'downloadCount': self.download_count or 0,
            'maxDownloads': self.max_downloads,
            'isPublic': bool(self.is_public),
        }

    def __repr__(self):
        return f'<SharedFile {self.original_name}>'


class SharedText(_ShareMixin, db.Model):
    """Text snippet available through a share link"""

    __tablename__ = 'shared_texts'

    id = db.Column(db.String(36), primary_key=True, default=_generate_id)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    uploaded_at = db.Column(db.DateTime, default=datetime.utcnow)
    expires_at = db.Column(db.DateTime, index=True)
    view_count = db.Column(db.Integer, default=0, nullable=False)
    max_views = db.Column(db.Integer)
    is_public = db.Column(db.Boolean, default=True)

    @property
    def access_count(self):
        return self.view_count

    @property
    def access_limit(self):
        return self.max_views

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'uploadedAt': self.uploaded_at.isoformat() if self.uploaded_at else None,
            'expiresAt': self.expires_at.isoformat() if self.expires_at else None,
            'viewCount': self.view_count or 0,
            'maxViews': self.max_views,
            'isPublic': bool(self.is_public),
        }

    def __repr__(self):
        return f'<SharedText {self.title}>'
