from __future__ import annotations

import math

from flask import jsonify

from officetools.domain.errors import ToolInputError
from officetools.domain.speech import (
    PITCH_RANGE,
    RATE_RANGE,
    VOLUME_RANGE,
    SpeechParameters,
    render_script,
    render_ssml,
)
from officetools.utils.downloads import attachment_response, timestamped_filename
from officetools.utils.payloads import request_data, text_field
from . import text_to_speech_bp


@text_to_speech_bp.route('/', methods=['GET'])
def index():
    defaults = SpeechParameters()
    return jsonify({
        'defaults': {'voice': defaults.voice, 'rate': defaults.rate, 'pitch': defaults.pitch, 'volume': defaults.volume},
        'ranges': {
            'rate': {'min': RATE_RANGE[0], 'max': RATE_RANGE[1], 'step': 0.1},
            'pitch': {'min': PITCH_RANGE[0], 'max': PITCH_RANGE[1], 'step': 0.1},
            'volume': {'min': VOLUME_RANGE[0], 'max': VOLUME_RANGE[1], 'step': 0.1},
        },
    })


@text_to_speech_bp.route('/script', methods=['POST'])
def download_script():
    text, params = _read_request()
    content = render_script(text, params)
    return attachment_response(content, timestamped_filename('tts-script-', 'txt'), 'text/plain; charset=utf-8')


@text_to_speech_bp.route('/ssml', methods=['POST'])
def download_ssml():
    text, params = _read_request()
    content = render_ssml(text, params)
    return attachment_response(
        content,
        timestamped_filename('tts-audio-config-', 'ssml'),
        'application/xml; charset=utf-8',
    )


def _read_request() -> tuple[str, SpeechParameters]:
    data = request_data()
    params = SpeechParameters(
        voice=text_field(data, 'voice'),
        rate=_number(data.get('rate'), 1.0, 'Rate'),
        pitch=_number(data.get('pitch'), 1.0, 'Pitch'),
        volume=_number(data.get('volume'), 1.0, 'Volume'),
    )
    return text_field(data, 'text', strip=False), params.validate()


def _number(value, default: float, label: str) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ToolInputError(f'{label} must be a number')
    if not math.isfinite(number):
        raise ToolInputError(f'{label} must be a number')
    return number
