"""Google Drive key-value storage with OAuth 2.0 authentication."""

import json
import logging
from io import BytesIO
from typing import Any, Dict, List, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.http import MediaIoBaseDownload, MediaIoBaseUpload

logger = logging.getLogger(__name__)

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"


def _escape(value: str) -> str:
    """Escape a value for use inside a quoted Drive query string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


class GoogleDriveStorage:
    """Store JSON blobs as one file per key in the user's app folder on Drive."""

    APP_FOLDER_NAME = "FitnessPro"

    def __init__(self, credentials: Credentials, service: Any = None) -> None:
        """
        Initialize Google Drive storage with OAuth credentials.

        Args:
            credentials: Google OAuth 2.0 credentials from user authentication
            service: Prebuilt Drive v3 service; built from credentials when omitted
        """
        self.credentials = credentials
        self.service = service or build("drive", "v3", credentials=credentials)
        self.app_folder_id: Optional[str] = None

    @staticmethod
    def filename_for(key: str) -> str:
        return f"{key.replace('/', '_')}.json"

    def _ensure_app_folder(self) -> str:
        """
        Ensure the app folder exists on the user's Drive.

        Returns:
            Folder ID of the app folder
        """
        if self.app_folder_id:
            return self.app_folder_id

        query = (
            f"name='{self.APP_FOLDER_NAME}' and "
            f"mimeType='{FOLDER_MIME_TYPE}' and "
            "trashed=false"
        )
        files = self._list(query, "files(id, name)")
        if files:
            self.app_folder_id = files[0]["id"]
            return self.app_folder_id

        folder_metadata = {"name": self.APP_FOLDER_NAME, "mimeType": FOLDER_MIME_TYPE}
        folder = self.service.files().create(body=folder_metadata, fields="id").execute()
        self.app_folder_id = folder.get("id")
        logger.info(f"Created Drive folder {self.APP_FOLDER_NAME}")
        return self.app_folder_id

    def _list(self, query: str, fields: str) -> List[Dict[str, Any]]:
        results = self.service.files().list(q=query, spaces="drive", fields=fields).execute()
        return results.get("files", [])

    def _find_file_id(self, filename: str) -> Optional[str]:
        folder_id = self._ensure_app_folder()
        query = (
            f"name='{_escape(filename)}' and "
            f"'{folder_id}' in parents and "
            "trashed=false"
        )
        files = self._list(query, "files(id)")
        return files[0]["id"] if files else None

    def put(self, key: str, value: Any) -> None:
        """Create or overwrite the blob stored under key."""
        filename = self.filename_for(key)
        json_data = json.dumps(value, ensure_ascii=False, indent=2)
        media = MediaIoBaseUpload(BytesIO(json_data.encode("utf-8")), mimetype="application/json")

        file_id = self._find_file_id(filename)
        if file_id:
            self.service.files().update(fileId=file_id, media_body=media).execute()
            return

        file_metadata = {"name": filename, "parents": [self._ensure_app_folder()]}
        self.service.files().create(body=file_metadata, media_body=media, fields="id").execute()

    def get(self, key: str) -> Optional[Any]:
        """
        Load the blob stored under key.

        Returns:
            Decoded JSON value, or None if the file doesn't exist
        """
        file_id = self._find_file_id(self.filename_for(key))
        if not file_id:
            return None

        request = self.service.files().get_media(fileId=file_id)
        fh = BytesIO()
        downloader = MediaIoBaseDownload(fh, request)

        done = False
        while not done:
            _, done = downloader.next_chunk()

        fh.seek(0)
        return json.loads(fh.read().decode("utf-8"))

    def delete(self, key: str) -> bool:
        """
        Delete the blob stored under key.

        Returns:
            True if a file was deleted, False otherwise
        """
        file_id = self._find_file_id(self.filename_for(key))
        if not file_id:
            return False
        self.service.files().delete(fileId=file_id).execute()
        return True
