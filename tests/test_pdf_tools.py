"""PDF merge and HTML-to-PDF endpoints."""

import io

import fitz  # PyMuPDF


def _pdf(pages, width=200, height=300):
    doc = fitz.open()
    for _ in range(pages):
        doc.new_page(width=width, height=height)
    data = doc.tobytes()
    doc.close()
    return data


def _page_count(data):
    with fitz.open(stream=data, filetype='pdf') as doc:
        return doc.page_count


def test_merge_keeps_every_page_in_order(client):
    resp = client.post(
        '/api/pdf/merge',
        data={'pdf': [
            (io.BytesIO(_pdf(1, width=100)), 'one.pdf'),
            (io.BytesIO(_pdf(2, width=250)), 'two.pdf'),
        ]},
        content_type='multipart/form-data',
    )
    assert resp.status_code == 200
    assert resp.mimetype == 'application/pdf'
    assert 'merged-document.pdf' in resp.headers['Content-Disposition']

    with fitz.open(stream=resp.data, filetype='pdf') as merged:
        assert merged.page_count == 3
        assert [round(page.rect.width) for page in merged] == [100, 250, 250]


def test_merge_needs_two_files(client):
    resp = client.post(
        '/api/pdf/merge',
        data={'pdf': [(io.BytesIO(_pdf(1)), 'one.pdf')]},
        content_type='multipart/form-data',
    )
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'At least 2 PDF files are required'


def test_merge_rejects_non_pdf(client):
    resp = client.post(
        '/api/pdf/merge',
        data={'pdf': [
            (io.BytesIO(_pdf(1)), 'one.pdf'),
            (io.BytesIO(b'plain text, not a pdf'), 'notes.pdf'),
        ]},
        content_type='multipart/form-data',
    )
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'notes.pdf is not a valid PDF'


def test_generate_pdf_is_a4(client):
    resp = client.post('/api/generate-pdf', json={'html': '<h1>Invoice</h1><p>Total: 42</p>'})
    assert resp.status_code == 200
    assert resp.mimetype == 'application/pdf'
    assert 'document.pdf' in resp.headers['Content-Disposition']
    assert resp.data.startswith(b'%PDF')

    with fitz.open(stream=resp.data, filetype='pdf') as doc:
        assert doc.page_count == 1
        assert round(doc[0].rect.width) == 595
        assert round(doc[0].rect.height) == 842
        assert 'Invoice' in doc[0].get_text()


def test_generate_pdf_flows_onto_more_pages(client):
    html = ''.join(f'<p>Line {i}</p>' for i in range(300))
    resp = client.post('/api/generate-pdf', json={'html': html})
    assert resp.status_code == 200
    assert _page_count(resp.data) > 1


def test_generate_pdf_requires_html(client):
    resp = client.post('/api/generate-pdf', json={'html': '   '})
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'HTML content is required'
