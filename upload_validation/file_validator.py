"""
Size and type constraints for uploaded files, plus the public metadata projection
"""
from dataclasses import dataclass
from typing import Dict, Any, Optional

# 100MB, a secondary guard below the host's own request size limit
MAX_FILE_SIZE = 100 * 1024 * 1024

ALLOWED_MIME_TYPES = (
    'text/plain',
    'text/csv',
    'application/json',
    'application/pdf',
    'image/jpeg',
    'image/png',
    'image/gif',
    'image/webp',
    'application/zip',
    'application/x-zip-compressed',
)


@dataclass(frozen=True)
class UploadFile:
    """A file received in a single request"""
    name: str
    size: int
    declared_type: str
    last_modified: Optional[int] = None


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


def validate_file(file: UploadFile) -> ValidationResult:
    """
    Check a file against the size and type constraints.
    Checks run in order and the first failure is the only one reported.
    """
    if file.size > MAX_FILE_SIZE:
        return ValidationResult(
            valid=False,
            error=f"File size {file.size} bytes exceeds maximum allowed size of {MAX_FILE_SIZE} bytes (100MB)"
        )

    if file.size == 0:
        return ValidationResult(valid=False, error="File is empty")

    # Trusts the client-declared type, the content is never sniffed
    if file.declared_type not in ALLOWED_MIME_TYPES:
        return ValidationResult(
            valid=False,
            error=f"File type '{file.declared_type}' is not allowed. Allowed types: {', '.join(ALLOWED_MIME_TYPES)}"
        )

    return ValidationResult(valid=True)


def extract_file_metadata(file: UploadFile) -> Dict[str, Any]:
    """Project a file into the metadata returned to the client"""
    metadata = {
        "name": file.name,
        "size": file.size,
        "type": file.declared_type,
    }
    if file.last_modified is not None:
        metadata["lastModified"] = file.last_modified
    return metadata
