"""Tool usage, bookmarks and dashboard statistics."""

from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError

from officetools.domain.registry import TOOLS, get_tool
from officetools.extensions import db
from officetools.models import Bookmark, Tool, ToolUsage, User

logger = logging.getLogger(__name__)

HOURS_SAVED_PER_USE = 0.5


class UnknownTool(LookupError):
    pass


def get_or_create_user(username: str) -> User:
    user = User.query.filter_by(username=username).first()
    if user is not None:
        return user

    user = User(username=username)
    # Placeholder identities never log in; give them an unguessable password.
    user.set_password(secrets.token_urlsafe(32))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Another request created it first.
        db.session.rollback()
        user = User.query.filter_by(username=username).one()
    return user


def ensure_tool(tool_id: str) -> Tool:
    """Return the persisted tool row, creating it from the registry if needed."""
    tool = db.session.get(Tool, tool_id)
    if tool is not None:
        return tool

    definition = get_tool(tool_id)
    if definition is None:
        raise UnknownTool(tool_id)

    tool = Tool.from_definition(definition)
    db.session.add(tool)
    db.session.flush()
    return tool


def seed_tools() -> int:
    """Insert registry tools missing from the database. Returns the number added."""
    existing = {tool_id for (tool_id,) in db.session.query(Tool.id).all()}
    created = 0
    for definition in TOOLS:
        if definition.id in existing:
            continue
        db.session.add(Tool.from_definition(definition))
        created += 1
    db.session.commit()
    return created


def record_tool_usage(tool_id: str, user: User, metadata: Optional[dict[str, Any]] = None) -> ToolUsage:
    tool = ensure_tool(tool_id)
    now = datetime.utcnow()

    usage = ToolUsage(tool_id=tool.id, user_id=user.id, used_at=now, usage_metadata=metadata or None)
    tool.usage_count = (tool.usage_count or 0) + 1
    tool.last_used = now

    db.session.add(usage)
    db.session.commit()
    logger.info('Recorded usage of %s by %s', tool.id, user.username)
    return usage


def add_bookmark(tool_id: str, user: User) -> Bookmark:
    tool = ensure_tool(tool_id)
    existing = Bookmark.query.filter_by(tool_id=tool.id, user_id=user.id).first()
    if existing is not None:
        return existing

    bookmark = Bookmark(tool_id=tool.id, user_id=user.id)
    tool.is_bookmarked = True
    db.session.add(bookmark)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return Bookmark.query.filter_by(tool_id=tool.id, user_id=user.id).one()
    return bookmark


def remove_bookmark(tool_id: str, user: User) -> bool:
    bookmark = Bookmark.query.filter_by(tool_id=tool_id, user_id=user.id).first()
    if bookmark is None:
        return False

    db.session.delete(bookmark)
    db.session.flush()
    tool = db.session.get(Tool, tool_id)
    if tool is not None:
        tool.is_bookmarked = Bookmark.query.filter_by(tool_id=tool_id).count() > 0
    db.session.commit()
    return True


def get_user_bookmarks(user: User) -> List[Bookmark]:
    return Bookmark.query.filter_by(user_id=user.id).order_by(Bookmark.created_at.desc()).all()


def get_tool_stats(user: User, now: Optional[datetime] = None) -> dict[str, Any]:
    now = now or datetime.utcnow()
    today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)

    total_usage = ToolUsage.query.filter_by(user_id=user.id).count()
    used_today = (
        ToolUsage.query
        .filter(ToolUsage.user_id == user.id, ToolUsage.used_at >= today_start)
        .count()
    )
    bookmarked = Bookmark.query.filter_by(user_id=user.id).count()

    return {
        'totalTools': len(TOOLS),
        'usedToday': used_today,
        'bookmarked': bookmarked,
        'timeSaved': f'{int(total_usage * HOURS_SAVED_PER_USE)}h',
    }
