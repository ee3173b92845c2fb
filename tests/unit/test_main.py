import json
from pathlib import Path

import pytest

from docdraft.main import main


@pytest.fixture()
def offline_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    upload_dir = tmp_path / "uploads"
    monkeypatch.setenv("COMPLETION_PROVIDER", "example")
    monkeypatch.setenv("UPLOAD_DIR", str(upload_dir))
    monkeypatch.setenv("CHUNK_DELAY_SECONDS", "0")
    return upload_dir


class TestMain:
    def test_prints_draft_json(
        self, offline_env: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "notes.md"
        source.write_text("Meeting notes. Action items follow.", encoding="utf-8")

        exit_code = main([str(source), "Turn these notes into a summary"])

        assert exit_code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["title"] == "Example Document"
        assert payload["tags"] == ["example", "offline"]
        assert payload["sourceDocument"]["filename"] == "notes.md"
        assert payload["sourceDocument"]["fileType"] == ".md"

    def test_staged_upload_is_removed(self, offline_env: Path, tmp_path: Path) -> None:
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        assert main([str(source), "clean up"]) == 0
        assert list(offline_env.iterdir()) == []

    def test_missing_file_returns_error(
        self, offline_env: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main([str(tmp_path / "absent.txt"), "summarize"])
        assert exit_code == 1
        assert "error:" in capsys.readouterr().err

    def test_unsupported_file_is_rejected_before_staging(
        self, offline_env: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "tool.exe"
        source.write_bytes(b"MZ\x90\x00")
        exit_code = main([str(source), "summarize"])
        assert exit_code == 1
        assert "File type .exe is not supported" in capsys.readouterr().err
        assert not offline_env.exists()

    def test_empty_file_is_rejected_before_staging(
        self, offline_env: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "empty.txt"
        source.write_bytes(b"")
        assert main([str(source), "summarize"]) == 1
        assert "File is empty" in capsys.readouterr().err
        assert not offline_env.exists()

    def test_oversized_file_reports_every_problem(
        self,
        offline_env: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("MAX_UPLOAD_SIZE_BYTES", "4")
        source = tmp_path / "big.bin"
        source.write_bytes(b"0123456789")
        assert main([str(source), "summarize"]) == 1
        err = capsys.readouterr().err
        assert "File size exceeds maximum allowed size" in err
        assert "File type .bin is not supported" in err
        assert not offline_env.exists()

    def test_unreadable_text_reports_user_message(
        self, offline_env: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "latin.txt"
        source.write_bytes(b"caf\xe9")
        assert main([str(source), "summarize"]) == 1
        assert "Failed to process uploaded file" in capsys.readouterr().err
        assert list(offline_env.iterdir()) == []

    def test_list_types_prints_accepted_formats(
        self, offline_env: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--list-types"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert ".pdf" in payload["extensions"]
        assert ".xlsx" in payload["extensions"]
        assert payload["max_size"] == 5 * 1024 * 1024

    def test_file_is_required_without_list_types(self, offline_env: Path) -> None:
        with pytest.raises(SystemExit):
            main([])

    def test_blank_instructions_are_rejected(
        self, offline_env: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "notes.txt"
        source.write_text("Short text.", encoding="utf-8")
        assert main([str(source), "  "]) == 1
        assert "Processing instructions are required" in capsys.readouterr().err
