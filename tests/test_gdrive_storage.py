"""Tests for the Google Drive key-value backend against a mocked Drive service."""

import json
from unittest.mock import MagicMock

import pytest

from src.memory.gdrive_memory import GoogleDriveStorage


@pytest.fixture
def service():
    service = MagicMock()
    files = service.files.return_value
    files.list.return_value.execute.return_value = {"files": []}
    files.create.return_value.execute.return_value = {"id": "folder-1"}
    return service


@pytest.fixture
def storage(service):
    return GoogleDriveStorage(credentials=None, service=service)


def test_filename_for():
    assert GoogleDriveStorage.filename_for("fitness_pro:a@b.com:plan") == "fitness_pro:a@b.com:plan.json"
    assert GoogleDriveStorage.filename_for("a/b") == "a_b.json"


def test_get_missing_key(storage):
    assert storage.get("fitness_pro:guest:plan") is None


def test_app_folder_created_once(storage, service):
    storage.get("k1")
    storage.get("k2")
    assert storage.app_folder_id == "folder-1"
    folder_creates = [
        call for call in service.files.return_value.create.call_args_list
        if call.kwargs.get("body", {}).get("mimeType") == "application/vnd.google-apps.folder"
    ]
    assert len(folder_creates) == 1


def test_put_creates_file_in_app_folder(storage, service):
    storage.put("fitness_pro:guest:form", {"age": 30})
    create_call = service.files.return_value.create.call_args_list[-1]
    assert create_call.kwargs["body"] == {"name": "fitness_pro:guest:form.json", "parents": ["folder-1"]}


def test_put_updates_existing_file(storage, service):
    storage.app_folder_id = "folder-1"
    service.files.return_value.list.return_value.execute.return_value = {"files": [{"id": "file-9"}]}
    storage.put("fitness_pro:guest:form", {"age": 31})
    update_call = service.files.return_value.update.call_args
    assert update_call.kwargs["fileId"] == "file-9"
    service.files.return_value.create.assert_not_called()


def test_delete(storage, service):
    assert storage.delete("missing") is False
    service.files.return_value.list.return_value.execute.return_value = {"files": [{"id": "file-9"}]}
    assert storage.delete("present") is True
    service.files.return_value.delete.assert_called_once_with(fileId="file-9")


def test_query_escapes_quotes(storage, service):
    storage.app_folder_id = "folder-1"
    storage.get("o'brien")
    query = service.files.return_value.list.call_args.kwargs["q"]
    assert "name='o\\'brien.json'" in query


def test_json_encoding_is_valid(storage, service, monkeypatch):
    captured = {}

    def fake_upload(fh, mimetype):
        captured["body"] = fh.read().decode("utf-8")
        captured["mimetype"] = mimetype
        return MagicMock()

    monkeypatch.setattr("src.memory.gdrive_memory.MediaIoBaseUpload", fake_upload)
    storage.put("k", {"name": "Café"})
    assert json.loads(captured["body"]) == {"name": "Café"}
    assert captured["mimetype"] == "application/json"
