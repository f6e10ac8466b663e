from __future__ import annotations

from flask import current_app, request

from officetools.domain.compression import InputFile
from officetools.services.pdf import merge_pdfs, render_html_to_pdf
from officetools.utils.downloads import attachment_response
from officetools.utils.payloads import request_data, text_field
from officetools.utils.uploads import read_upload
from . import pdf_tools_bp

MERGED_FILENAME = 'merged-document.pdf'
GENERATED_FILENAME = 'document.pdf'


@pdf_tools_bp.route('/pdf/merge', methods=['POST'])
def merge():
    """Merge the uploaded ``pdf`` parts, in upload order, into one PDF."""
    inputs = []
    for upload in request.files.getlist('pdf'):
        if not (upload and upload.filename):
            continue
        name, data = read_upload(upload)
        inputs.append(InputFile(name=name, data=data))

    output = merge_pdfs(inputs)
    current_app.logger.info('Merged %d PDFs (%d bytes)', len(inputs), len(output))
    return attachment_response(output, MERGED_FILENAME, 'application/pdf')


@pdf_tools_bp.route('/generate-pdf', methods=['POST'])
def generate():
    html = text_field(request_data(), 'html', strip=False)
    output = render_html_to_pdf(html)
    return attachment_response(output, GENERATED_FILENAME, 'application/pdf')
