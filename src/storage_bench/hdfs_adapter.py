"""HDFS storage adapter backed by the WebHDFS client."""
import logging
import shutil
from typing import Optional

import requests
from hdfs import InsecureClient
from hdfs.util import HdfsError

from .exceptions import DeleteError, UploadError
from .payload_source import RandomPayloadSource
from .storage_adapter import StorageClientAdapter


# Configure logging
logger = logging.getLogger(__name__)


class HdfsStorageAdapter(StorageClientAdapter):
    """Writes files to HDFS through the namenode's WebHDFS endpoint."""

    api_name = "WebHDFS"

    def __init__(self, url: str, payload: Optional[RandomPayloadSource] = None,
                 user: Optional[str] = None, session: Optional[requests.Session] = None,
                 client: Optional[InsecureClient] = None):
        self.url = url
        self.payload = payload
        self._session = session or requests.Session()
        self._client = client or InsecureClient(url, user=user, session=self._session)
        self._closed = False

    def upload_from_local_file(self, local_path: str, destination: str) -> int:
        try:
            with open(local_path, "rb") as reader, \
                    self._client.write(destination, overwrite=True) as writer:
                shutil.copyfileobj(reader, writer)
                written = reader.tell()
        except (HdfsError, OSError) as e:
            logger.error(f"Upload of {local_path} to {destination} failed: {e}")
            raise UploadError(f"Upload to {destination} failed: {e}") from e
        return written

    def upload_bytes(self, size_in_bytes: int, destination: str) -> int:
        if self.payload is None:
            raise UploadError("No payload source configured for synthetic uploads")
        try:
            with self._client.write(destination, overwrite=True) as writer:
                for chunk in self.payload.iter_chunks(size_in_bytes):
                    writer.write(chunk)
            return int(self._client.status(destination)["length"])
        except (HdfsError, OSError) as e:
            logger.error(f"Upload of {size_in_bytes} bytes to {destination} failed: {e}")
            raise UploadError(f"Upload to {destination} failed: {e}") from e

    def delete_object(self, destination: str) -> None:
        try:
            deleted = self._client.delete(destination, recursive=False)
        except (HdfsError, OSError) as e:
            raise DeleteError(f"Failed to delete {destination}: {e}") from e
        if not deleted:
            raise DeleteError(f"Failed to delete {destination}: path does not exist")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._session.close()
        logger.debug(f"Closed WebHDFS session for {self.url}")
