from pathlib import Path
from unittest.mock import patch

from docdraft.processor.uploads import (
    UploadedFile,
    release_upload,
    stage_upload,
    upload_file_name,
)


class TestStageUpload:
    def test_writes_bytes_under_upload_dir(self, tmp_path: Path) -> None:
        upload = stage_upload(b"hello", "notes.md", tmp_path / "uploads")
        assert upload.path.parent == tmp_path / "uploads"
        assert upload.path.read_bytes() == b"hello"
        assert upload.original_name == "notes.md"
        assert upload.size == 5

    def test_names_keep_extension_and_are_unique(self) -> None:
        first = upload_file_name("Report.PDF")
        second = upload_file_name("Report.PDF")
        assert first.startswith("upload-")
        assert first.endswith(".PDF")
        assert first != second


class TestReleaseUpload:
    def test_deletes_file(self, tmp_path: Path) -> None:
        upload = stage_upload(b"x", "a.txt", tmp_path)
        release_upload(upload)
        assert not upload.path.exists()

    def test_missing_file_is_ignored(self, tmp_path: Path) -> None:
        upload = UploadedFile(path=tmp_path / "gone.txt", original_name="gone.txt", size=0)
        release_upload(upload)

    def test_os_error_is_logged(self, tmp_path: Path) -> None:
        upload = UploadedFile(path=tmp_path, original_name="dir", size=0)
        with patch("docdraft.processor.uploads.Log") as mock_log:
            release_upload(upload)
        mock_log.error.assert_called_once()
        assert tmp_path.exists()
