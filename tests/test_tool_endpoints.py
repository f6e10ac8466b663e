"""HTTP checks for the four implemented tools."""

import io
import re
import zipfile

from PIL import Image


# ---- BMI calculator ----

def test_bmi_index_lists_units(client):
    resp = client.get('/tools/bmi-calculator/')
    assert resp.status_code == 200
    data = resp.get_json()
    assert [u['value'] for u in data['weight_units']] == ['kg', 'lb']
    assert 'in' in [u['value'] for u in data['height_units']]


def test_bmi_metric(client):
    resp = client.post('/tools/bmi-calculator/', json={'weight': 70, 'height': 175})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['bmi'] == 22.9
    assert data['category'] == 'Normal weight'
    assert data['message'] == 'Your BMI is 22.9 (Normal weight)'


def test_bmi_imperial_form(client):
    resp = client.post('/tools/bmi-calculator/', data={
        'weight': '154',
        'height': '68',
        'weight_unit': 'lb',
        'height_unit': 'in',
    })
    assert resp.status_code == 200
    assert resp.get_json()['bmi'] == 23.4


def test_bmi_missing_height(client):
    resp = client.post('/tools/bmi-calculator/', json={'weight': 70, 'height': ''})
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Please enter both weight and height'


def test_bmi_rejects_non_positive(client):
    resp = client.post('/tools/bmi-calculator/', json={'weight': 0, 'height': 170})
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Please enter valid positive numbers'


def test_bmi_unknown_unit(client):
    resp = client.post('/tools/bmi-calculator/', json={'weight': 70, 'height': 175, 'height_unit': 'yd'})
    assert resp.status_code == 400


# ---- Photo cropper ----

def _crop(client, png_bytes, **fields):
    form = {
        'image': (io.BytesIO(png_bytes), 'photo.png'),
        'displayed_width': '200',
        'displayed_height': '150',
    }
    form.update({k: str(v) for k, v in fields.items()})
    return client.post('/tools/photo-cropper/', data=form, content_type='multipart/form-data')


def test_crop_returns_jpeg_at_natural_resolution(client, png_bytes):
    resp = _crop(client, png_bytes, x=0, y=0, width=100, height=150)
    assert resp.status_code == 200
    assert resp.mimetype == 'image/jpeg'
    assert 'cropped-image.jpg' in resp.headers['Content-Disposition']

    img = Image.open(io.BytesIO(resp.data))
    assert img.format == 'JPEG'
    assert img.size == (200, 300)
    r, g, b = img.convert('RGB').getpixel((100, 150))
    assert r > 200 and g < 60 and b < 60


def test_crop_flattens_transparency_on_white(client, png_bytes):
    resp = _crop(client, png_bytes, x=100, y=0, width=100, height=150)
    assert resp.status_code == 200
    img = Image.open(io.BytesIO(resp.data)).convert('RGB')
    assert all(channel > 240 for channel in img.getpixel((100, 150)))


def test_crop_requires_image(client):
    resp = client.post('/tools/photo-cropper/', data={'x': '0'}, content_type='multipart/form-data')
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Please upload an image'


def test_crop_rejects_non_image(client):
    resp = client.post(
        '/tools/photo-cropper/',
        data={'image': (io.BytesIO(b'not an image'), 'notes.txt'), 'displayed_width': '1', 'displayed_height': '1'},
        content_type='multipart/form-data',
    )
    assert resp.status_code == 400


def test_drag_is_clamped(client):
    resp = client.post('/tools/photo-cropper/drag', json={
        'area': {'x': 50, 'y': 50, 'width': 200, 'height': 200},
        'container': {'width': 500, 'height': 400},
        'start': {'x': 100, 'y': 100},
        'moves': [{'x': 200, 'y': 150}, {'x': 900, 'y': 900}],
    })
    assert resp.status_code == 200
    assert resp.get_json()['area'] == {'x': 300, 'y': 200, 'width': 200, 'height': 200}


def test_aspect_ratio_endpoint(client):
    resp = client.post('/tools/photo-cropper/aspect-ratio', json={
        'area': {'x': 50, 'y': 50, 'width': 200, 'height': 200},
        'container': {'width': 600, 'height': 500},
        'aspect_ratio': '16:9',
    })
    assert resp.status_code == 200
    area = resp.get_json()['area']
    assert area['width'] == 200
    assert area['height'] == 112.5


# ---- Text to speech ----

def test_tts_script_download(client):
    resp = client.post('/tools/text-to-speech/script', json={'text': 'Hello there', 'rate': 1.5, 'volume': 0.5})
    assert resp.status_code == 200
    assert resp.mimetype == 'text/plain'
    assert re.search(r'filename="tts-script-\d+\.txt"', resp.headers['Content-Disposition'])
    body = resp.get_data(as_text=True)
    assert '- Rate: 1.5x' in body
    assert '- Volume: 50%' in body
    assert 'Hello there' in body


def test_tts_ssml_download(client):
    resp = client.post('/tools/text-to-speech/ssml', data={'text': 'Tom & Jerry', 'voice': 'Alice'})
    assert resp.status_code == 200
    assert resp.mimetype == 'application/xml'
    assert re.search(r'filename="tts-audio-config-\d+\.ssml"', resp.headers['Content-Disposition'])
    body = resp.get_data(as_text=True)
    assert '<voice name="Alice"' in body
    assert 'Tom &amp; Jerry' in body


def test_tts_blank_text(client):
    resp = client.post('/tools/text-to-speech/ssml', json={'text': '  '})
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Please enter some text first'


def test_tts_bad_pitch(client):
    resp = client.post('/tools/text-to-speech/script', json={'text': 'hi', 'pitch': 'loud'})
    assert resp.status_code == 400


# ---- File compressor ----

def test_compressor_builds_zip(client):
    resp = client.post(
        '/tools/file-compressor/',
        data={
            'files': [
                (io.BytesIO(b'a' * 5000), 'a.txt'),
                (io.BytesIO(b'b' * 3000), 'b.txt'),
            ],
            'level': '9',
        },
        content_type='multipart/form-data',
    )
    assert resp.status_code == 200
    assert resp.mimetype == 'application/zip'
    assert re.search(r'filename="compressed_files_\d+\.zip"', resp.headers['Content-Disposition'])
    assert resp.headers['X-File-Count'] == '2'
    assert resp.headers['X-Original-Size'] == '8000'

    with zipfile.ZipFile(io.BytesIO(resp.data)) as archive:
        assert sorted(archive.namelist()) == ['a.txt', 'b.txt']
        assert archive.read('b.txt') == b'b' * 3000


def test_compressor_requires_files(client):
    resp = client.post('/tools/file-compressor/', data={'level': '6'}, content_type='multipart/form-data')
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Please select at least one file to compress'


def test_compressor_rejects_unknown_level(client):
    resp = client.post(
        '/tools/file-compressor/',
        data={'files': [(io.BytesIO(b'x'), 'x.txt')], 'level': '4'},
        content_type='multipart/form-data',
    )
    assert resp.status_code == 400


# ---- Malformed bodies ----

def test_bmi_rejects_json_list(client):
    resp = client.post('/tools/bmi-calculator/', json=[70, 175])
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Request body must be a JSON object'


def test_bmi_numeric_unit_is_rejected_not_crashed(client):
    resp = client.post('/tools/bmi-calculator/', json={'weight': 70, 'height': 175, 'weight_unit': 1})
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Unsupported weight unit: 1'


def test_tts_numeric_voice_is_text(client):
    resp = client.post('/tools/text-to-speech/script', json={'text': 'hi', 'voice': 3})
    assert resp.status_code == 200
    assert '- Voice: 3' in resp.get_data(as_text=True)


def test_tts_object_text(client):
    resp = client.post('/tools/text-to-speech/ssml', json={'text': {'a': 1}})
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'text must be text'


def test_drag_moves_must_be_a_list(client):
    resp = client.post('/tools/photo-cropper/drag', json={
        'area': {'x': 50, 'y': 50, 'width': 200, 'height': 200},
        'container': {'width': 500, 'height': 400},
        'start': {'x': 100, 'y': 100},
        'moves': 5,
    })
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'moves must be a list of points'


def test_aspect_ratio_area_must_be_object(client):
    resp = client.post('/tools/photo-cropper/aspect-ratio', json={
        'area': [1, 2, 3, 4],
        'container': {'width': 600, 'height': 500},
        'aspect_ratio': '1:1',
    })
    assert resp.status_code == 400


def test_drag_rejects_json_list(client):
    resp = client.post('/tools/photo-cropper/drag', json=[1, 2])
    assert resp.status_code == 400
