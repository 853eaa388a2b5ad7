#!/usr/bin/env python3
"""
Google Drive Service - Download assignment attachments from Google Drive.

Attachments are returned base64-encoded, ready to embed in a data URL for
the vision model.
"""

import io
import base64
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any

from googleapiclient.http import MediaIoBaseDownload

from google_services.auth import GoogleAuth

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


def is_vision_readable(mime_type: str) -> bool:
    """Images and PDFs can be sent to the vision model."""
    return mime_type.startswith("image/") or mime_type == PDF_MIME_TYPE


@dataclass
class Attachment:
    """A downloaded Drive file."""
    name: str
    mime_type: str
    data: str  # base64

    @property
    def is_vision_readable(self) -> bool:
        return is_vision_readable(self.mime_type)


class DriveService:
    """
    Google Drive API service wrapper.

    Provides metadata lookup and download for files attached to
    Classroom coursework.
    """

    def __init__(self, auth: Optional[GoogleAuth] = None, service: Any = None):
        """
        Initialize Drive service.

        Args:
            auth: GoogleAuth instance (creates one if not provided)
            service: Prebuilt Drive API resource (skips auth)
        """
        self._auth = auth
        self._service = service

    @property
    def service(self):
        """Get the Drive API service (lazy load)."""
        if self._service is None:
            if self._auth is None:
                self._auth = GoogleAuth()
            self._service = self._auth.get_service("drive")
        return self._service

    def get_file_metadata(self, file_id: str) -> Dict[str, Any]:
        """
        Get file metadata.

        Args:
            file_id: Google Drive file ID

        Returns:
            Dict with name, mimeType and size
        """
        return self.service.files().get(
            fileId=file_id,
            fields="name, mimeType, size",
        ).execute()

    def download_file(self, file_id: str) -> bytes:
        """
        Download file content from Drive.

        Args:
            file_id: Google Drive file ID

        Returns:
            File content as bytes
        """
        request = self.service.files().get_media(fileId=file_id)
        file_content = io.BytesIO()

        downloader = MediaIoBaseDownload(file_content, request)
        done = False

        while not done:
            status, done = downloader.next_chunk()

        return file_content.getvalue()

    def fetch_attachment(self, file_id: str) -> Optional[Attachment]:
        """
        Fetch metadata then content for a file.

        Args:
            file_id: Google Drive file ID

        Returns:
            Attachment, or None if either call fails
        """
        try:
            meta = self.get_file_metadata(file_id)
            content = self.download_file(file_id)
        except Exception as e:
            logger.warning(f"Failed to fetch Drive file {file_id}: {e}")
            return None

        return Attachment(
            name=meta.get("name", ""),
            mime_type=meta.get("mimeType", ""),
            data=base64.b64encode(content).decode("utf-8"),
        )
