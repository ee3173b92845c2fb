"""Supported upload formats and pre-upload validation."""

from pathlib import Path

SUPPORTED_FILE_TYPES: dict[str, str] = {
    ".txt": "text/plain",
    ".md": "text/markdown",
    ".json": "application/json",
    ".csv": "text/csv",
    ".html": "text/html",
    ".xml": "application/xml",
    ".js": "application/javascript",
    ".jsx": "application/javascript",
    ".ts": "application/typescript",
    ".tsx": "application/typescript",
    ".py": "text/x-python",
    ".java": "text/x-java",
    ".cpp": "text/x-c++src",
    ".c": "text/x-csrc",
    ".css": "text/css",
    ".scss": "text/x-scss",
    ".sql": "application/sql",
    ".yaml": "application/x-yaml",
    ".yml": "application/x-yaml",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".pdf": "application/pdf",
}

MAX_FILE_SIZE = 5 * 1024 * 1024


def file_extension(filename: str) -> str:
    return Path(filename).suffix.lower()


def is_supported_file_type(filename: str) -> bool:
    return file_extension(filename) in SUPPORTED_FILE_TYPES


def get_mime_type(filename: str) -> str:
    return SUPPORTED_FILE_TYPES.get(file_extension(filename), "application/octet-stream")


def format_size_limit(max_size: int) -> str:
    return f"{max_size / (1024 * 1024):g}MB"


def validate_upload(
    original_name: str,
    size: int,
    max_size: int = MAX_FILE_SIZE,
) -> list[str]:
    """Check an upload before it is staged.

    Returns:
        Human-readable problems; empty when the upload is acceptable.
    """
    errors: list[str] = []
    if size > max_size:
        errors.append(
            f"File size exceeds maximum allowed size of {format_size_limit(max_size)}"
        )
    if not is_supported_file_type(original_name):
        errors.append(f"File type {file_extension(original_name)} is not supported")
    if size == 0:
        errors.append("File is empty")
    return errors


def supported_file_types(max_size: int = MAX_FILE_SIZE) -> dict[str, object]:
    """Describe accepted uploads for clients."""
    return {
        "extensions": list(SUPPORTED_FILE_TYPES),
        "mime_types": list(SUPPORTED_FILE_TYPES.values()),
        "max_size": max_size,
        "max_size_mb": max_size / (1024 * 1024),
    }
