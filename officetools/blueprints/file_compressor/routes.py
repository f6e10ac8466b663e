from __future__ import annotations

from flask import current_app, jsonify, request

from officetools.domain.compression import (
    COMPRESSION_LEVELS,
    DEFAULT_LEVEL,
    InputFile,
    compress_files,
    format_file_size,
)
from officetools.domain.errors import ToolInputError
from officetools.utils.downloads import attachment_response, timestamped_filename
from officetools.utils.uploads import read_upload
from . import file_compressor_bp


@file_compressor_bp.route('/', methods=['GET'])
def index():
    return jsonify({
        'levels': [{'value': str(level), 'label': label} for level, label in COMPRESSION_LEVELS.items()],
        'default_level': str(DEFAULT_LEVEL),
    })


@file_compressor_bp.route('/', methods=['POST'])
def compress():
    """Compress every uploaded ``files`` part into one ZIP download."""
    uploads = [f for f in request.files.getlist('files') if f and f.filename]
    if not uploads:
        raise ToolInputError('Please select at least one file to compress')

    level = _parse_level(request.form.get('level'))
    inputs = []
    for upload in uploads:
        name, data = read_upload(upload)
        inputs.append(InputFile(name=name, data=data))

    result = compress_files(inputs, level=level)
    current_app.logger.info(
        'Compressed %d files: %s -> %s (level %d)',
        result.file_count,
        format_file_size(result.original_size),
        format_file_size(result.compressed_size),
        level,
    )

    response = attachment_response(
        result.archive,
        timestamped_filename('compressed_files_', 'zip'),
        'application/zip',
    )
    response.headers['X-Original-Size'] = str(result.original_size)
    response.headers['X-File-Count'] = str(result.file_count)
    return response


def _parse_level(value) -> int:
    if value is None or not str(value).strip():
        return DEFAULT_LEVEL
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ToolInputError('Compression level must be one of 0, 1, 3, 6 or 9')
    if level not in COMPRESSION_LEVELS:
        raise ToolInputError('Compression level must be one of 0, 1, 3, 6 or 9')
    return level
