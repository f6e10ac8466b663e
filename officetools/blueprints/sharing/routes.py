from __future__ import annotations

from flask import current_app, jsonify, request, send_file

from officetools.extensions import limiter
from officetools.services import sharing
from officetools.utils.payloads import request_data, text_field
from . import sharing_bp


def _upload_limit() -> str:
    return current_app.config.get('UPLOAD_RATE_LIMIT', '30 per hour')


def _share_url(kind: str, item_id: str) -> str:
    return f"{request.host_url.rstrip('/')}/{kind}/{item_id}"


def _folder() -> str:
    return current_app.config['SHARED_UPLOAD_FOLDER']


# ---- Files ----

@sharing_bp.route('/files/upload', methods=['POST'])
@limiter.limit(_upload_limit)
def upload_file():
    shared = sharing.create_shared_file(
        request.files.get('file'),
        _folder(),
        max_downloads=request.form.get('maxDownloads'),
        expires_in=request.form.get('expiresIn'),
    )
    return jsonify({
        'id': shared.id,
        'filename': shared.original_name,
        'size': shared.file_size,
        'uploadedAt': shared.uploaded_at.isoformat() if shared.uploaded_at else None,
        'shareUrl': _share_url('shared', shared.id),
    })


@sharing_bp.route('/files', methods=['GET'])
def list_files():
    return jsonify([shared.to_dict() for shared in sharing.list_shared_files()])


@sharing_bp.route('/files/<file_id>', methods=['GET'])
def get_file(file_id):
    return jsonify(sharing.get_accessible_file(file_id).to_dict())


@sharing_bp.route('/files/<file_id>/download', methods=['GET'])
def download_file(file_id):
    shared, path = sharing.open_for_download(file_id, _folder())
    return send_file(
        path,
        mimetype=shared.mime_type,
        as_attachment=True,
        download_name=shared.original_name,
        max_age=0,
    )


@sharing_bp.route('/files/<file_id>', methods=['DELETE'])
def delete_file(file_id):
    sharing.delete_shared_file(file_id, _folder())
    return jsonify({'success': True})


# ---- Texts ----

@sharing_bp.route('/texts/upload', methods=['POST'])
@limiter.limit(_upload_limit)
def upload_text():
    data = request_data()
    shared = sharing.create_shared_text(
        text_field(data, 'title'),
        text_field(data, 'content', strip=False),
        max_views=data.get('maxDownloads'),
        expires_in=data.get('expiresIn'),
    )
    return jsonify({
        'id': shared.id,
        'title': shared.title,
        'content': shared.content,
        'uploadedAt': shared.uploaded_at.isoformat() if shared.uploaded_at else None,
        'shareUrl': _share_url('shared-text', shared.id),
    })


@sharing_bp.route('/texts', methods=['GET'])
def list_texts():
    return jsonify([shared.to_dict() for shared in sharing.list_shared_texts()])


@sharing_bp.route('/texts/<text_id>', methods=['GET'])
def get_text(text_id):
    return jsonify(sharing.get_accessible_text(text_id).to_dict())


@sharing_bp.route('/texts/<text_id>/view', methods=['POST'])
def view_text(text_id):
    sharing.record_text_view(text_id)
    return jsonify({'success': True})


@sharing_bp.route('/texts/<text_id>', methods=['DELETE'])
def delete_text(text_id):
    sharing.delete_shared_text(text_id)
    return jsonify({'success': True})
