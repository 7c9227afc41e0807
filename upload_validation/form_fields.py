"""
Extraction of a named field from a multipart request
"""
from dataclasses import dataclass
from io import BytesIO
from typing import Tuple, Union
import azure.functions as func
from werkzeug.datastructures import MultiDict
from werkzeug.formparser import FormDataParser
from werkzeug.http import parse_options_header
from .file_validator import UploadFile


@dataclass(frozen=True)
class FileField:
    file: UploadFile


@dataclass(frozen=True)
class TextField:
    value: str


@dataclass(frozen=True)
class Absent:
    pass


FormField = Union[FileField, TextField, Absent]


def parse_form_data(req: func.HttpRequest) -> Tuple[MultiDict, MultiDict]:
    """
    Parse the request body into (form, files).
    Unlike req.form / req.files, a malformed body raises instead of
    coming back as empty fields.
    """
    body = req.get_body()
    mimetype, options = parse_options_header(req.headers.get('Content-Type', ''))
    parser = FormDataParser(silent=False)
    _, form, files = parser.parse(BytesIO(body), mimetype, len(body), options)
    return form, files


def extract_file_field(req: func.HttpRequest, field_name: str = 'file') -> FormField:
    """
    Look up a form field and report whether it arrived as a file part,
    a plain text value, or not at all.
    Body parsing happens here, so malformed bodies raise to the caller.
    """
    form, files = parse_form_data(req)

    upload = files.get(field_name)
    if upload is not None:
        content = upload.read()
        return FileField(UploadFile(
            name=upload.filename or '',
            size=len(content),
            declared_type=upload.mimetype or ''
        ))

    value = form.get(field_name)
    if value is not None:
        return TextField(value)

    return Absent()
