"""
File upload validation endpoint
"""
import logging
import sys
import azure.functions as func
from upload_validation.config import config
from upload_validation.file_validator import validate_file, extract_file_metadata
from upload_validation.form_fields import extract_file_field, FileField
from upload_validation.responses import (
    error_response,
    json_response,
    preflight_response,
    success_body,
    utc_timestamp,
)

# Force logging to stdout
logging.basicConfig(
    level=config.log_level,
    format='%(asctime)s - %(levelname)s - %(message)s',
    stream=sys.stdout,
    force=True
)

METHOD_NOT_ALLOWED = "Method not allowed. Only POST requests are accepted."
MULTIPART_REQUIRED = "Content-Type must be multipart/form-data"
NO_FILE_PROVIDED = 'No file provided. Please include a file in the "file" field.'


def main(req: func.HttpRequest) -> func.HttpResponse:
    # CORS preflight
    if req.method == 'OPTIONS':
        return preflight_response()

    if req.method != 'POST':
        return error_response(METHOD_NOT_ALLOWED, 405)

    content_type = req.headers.get('Content-Type')
    if not content_type or 'multipart/form-data' not in content_type:
        return error_response(MULTIPART_REQUIRED, 400)

    try:
        field = extract_file_field(req, 'file')
    except Exception as e:
        # Includes oversized or malformed bodies rejected while parsing
        logging.error(f"File upload error: {str(e)}")
        return error_response(f"File upload failed: {str(e) or 'Unknown error'}", 500)

    if not isinstance(field, FileField):
        return error_response(NO_FILE_PROVIDED, 400)

    validation = validate_file(field.file)
    if not validation.valid:
        return error_response(validation.error, 400)

    metadata = extract_file_metadata(field.file)
    logging.info(
        f"File upload successful: name={metadata['name']} size={metadata['size']} "
        f"type={metadata['type']} timestamp={utc_timestamp()}"
    )

    return json_response(success_body(metadata), 200)
