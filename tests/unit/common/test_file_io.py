import json
import os
from unittest.mock import MagicMock, patch

import pytest
import requests

from utils.data.json_manager import JSONManager
from utils.file_manager import FileManager

pytestmark = pytest.mark.unit


def fake_response(chunks, status_error=None):
    response = MagicMock()
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    response.iter_content.return_value = iter(chunks)
    if status_error:
        response.raise_for_status.side_effect = status_error
    return response


class TestJSONManager:
    def test_missing_file_returns_default(self, tmp_path):
        assert JSONManager.read_json(str(tmp_path / "none.json"), default={}) == {}

    def test_missing_file_without_default(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JSONManager.read_json(str(tmp_path / "none.json"))

    def test_write_replaces_content(self, tmp_path):
        path = str(tmp_path / "config.json")

        JSONManager.write_json({"a": 1}, path)
        JSONManager.write_json({"b": "é"}, path, mode=0o600)

        assert JSONManager.read_json(path) == {"b": "é"}
        assert [name for name in os.listdir(tmp_path) if name.startswith(".tmp-")] == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            JSONManager.read_json(str(path), default={})


class TestFileManager:
    def test_validate_file(self, tmp_path):
        existing = tmp_path / "a.txt"
        existing.write_text("x")

        FileManager.validate_file(str(existing))
        with pytest.raises(FileNotFoundError, match="File not found"):
            FileManager.validate_file(str(tmp_path))

    def test_resolve_destination(self, tmp_path):
        url = "https://files.slack.com/files-pri/T1-F1/download/q3%20report.pdf"

        assert FileManager.resolve_destination(str(tmp_path), url) == str(tmp_path / "q3 report.pdf")
        assert FileManager.resolve_destination("out.pdf", url) == "out.pdf"

    def test_download_writes_chunks(self, tmp_path):
        destination = str(tmp_path / "nested" / "report.pdf")

        with patch("utils.file_manager.requests.get", return_value=fake_response([b"ab", b"cd"])) as get:
            path = FileManager.download_file("https://files.slack.com/x", destination, headers={"A": "b"})

        assert path == destination
        assert open(path, "rb").read() == b"abcd"
        assert get.call_args.kwargs["headers"] == {"A": "b"}
        assert get.call_args.kwargs["stream"] is True

    def test_http_error_leaves_no_file(self, tmp_path):
        destination = tmp_path / "report.pdf"
        response = fake_response([], status_error=requests.exceptions.HTTPError("403"))

        with patch("utils.file_manager.requests.get", return_value=response):
            with pytest.raises(requests.exceptions.HTTPError):
                FileManager.download_file("https://files.slack.com/x", str(destination))

        assert os.listdir(tmp_path) == []

    def test_rejects_non_http_url(self, tmp_path):
        with pytest.raises(ValueError):
            FileManager.download_file("file:///etc/passwd", str(tmp_path / "x"))
