"""
Tool registry, navigation, usage and bookmark endpoints.

Usage and bookmarks are attributed to a single anonymous identity until
accounts exist (see ANONYMOUS_USERNAME in config).
"""

from flask import Blueprint, abort, current_app, jsonify, request

from officetools.domain.navigation import NavigationState
from officetools.domain.registry import CATEGORIES, get_tool
from officetools.extensions import db
from officetools.models import Tool
from officetools.services import tracking
from officetools.utils.payloads import json_body, text_field

api_bp = Blueprint('api', __name__)


def _current_user():
    return tracking.get_or_create_user(current_app.config.get('ANONYMOUS_USERNAME', 'anonymous'))


def _require_tool(tool_id):
    definition = get_tool(tool_id)
    if definition is None:
        abort(404, description='Tool not found')
    return definition


@api_bp.route('/categories')
def categories():
    return jsonify([
        {'id': category.id, 'name': category.name, 'icon': category.icon}
        for category in CATEGORIES
    ])


@api_bp.route('/tools')
def list_tools():
    """Tools for the dashboard grid.

    ``?category=`` selects a sidebar category, ``?q=`` searches and wins over
    the category when non-blank.
    """
    state = NavigationState()
    state.select_category(request.args.get('category') or 'all')
    state.set_search(request.args.get('q', ''))

    tools = state.visible_tools()
    return jsonify({
        'title': state.title(),
        'activeCategory': state.active_category,
        'searchQuery': state.search_query,
        'tools': [tool.to_dict() for tool in tools],
        'emptyMessage': state.empty_message() if not tools else None,
    })


@api_bp.route('/tools/<tool_id>')
def tool_detail(tool_id):
    definition = _require_tool(tool_id)
    payload = definition.to_dict()
    tool = db.session.get(Tool, tool_id)
    if tool is None:
        payload.update({'isBookmarked': False, 'usageCount': 0, 'lastUsed': None})
    else:
        payload.update({
            'isBookmarked': bool(tool.is_bookmarked),
            'usageCount': tool.usage_count or 0,
            'lastUsed': tool.last_used.isoformat() if tool.last_used else None,
        })
    return jsonify(payload)


@api_bp.route('/tools/<tool_id>/usage', methods=['POST'])
def record_usage(tool_id):
    _require_tool(tool_id)
    data = json_body()
    metadata = data.get('metadata')
    if metadata is not None and not isinstance(metadata, dict):
        return jsonify({'error': 'metadata must be an object'}), 400

    usage = tracking.record_tool_usage(tool_id, _current_user(), metadata)
    return jsonify(usage.to_dict())


@api_bp.route('/bookmarks', methods=['GET'])
def list_bookmarks():
    return jsonify([bookmark.to_dict() for bookmark in tracking.get_user_bookmarks(_current_user())])


@api_bp.route('/bookmarks', methods=['POST'])
def add_bookmark():
    tool_id = text_field(json_body(), 'toolId')
    if not tool_id:
        return jsonify({'error': 'toolId is required'}), 400
    _require_tool(tool_id)

    bookmark = tracking.add_bookmark(tool_id, _current_user())
    return jsonify(bookmark.to_dict())


@api_bp.route('/bookmarks/<tool_id>', methods=['DELETE'])
def remove_bookmark(tool_id):
    tracking.remove_bookmark(tool_id, _current_user())
    return jsonify({'success': True})


@api_bp.route('/stats')
def stats():
    return jsonify(tracking.get_tool_stats(_current_user()))
