import secrets
import time
from dataclasses import dataclass
from pathlib import Path

from docdraft.logging.logger import Log


@dataclass(frozen=True)
class UploadedFile:
    """A client upload staged as a temporary file on local disk."""

    path: Path
    original_name: str
    size: int


def upload_file_name(original_name: str) -> str:
    """Build a unique temp name: upload-{millis}-{random}{ext}"""
    suffix = Path(original_name).suffix
    return f"upload-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"


def stage_upload(data: bytes, original_name: str, upload_dir: Path) -> UploadedFile:
    """Write upload bytes to a fresh temp file under *upload_dir*."""
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / upload_file_name(original_name)
    path.write_bytes(data)
    return UploadedFile(path=path, original_name=original_name, size=len(data))


def release_upload(upload: UploadedFile) -> None:
    """Delete the temp file. Missing files are ignored; OS errors are logged."""
    try:
        upload.path.unlink(missing_ok=True)
    except OSError as exc:
        Log.error(f"Error cleaning up uploaded file {upload.path}: {exc}")
