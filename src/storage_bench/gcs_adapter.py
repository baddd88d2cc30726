"""Google Cloud Storage adapter."""
import logging
from typing import Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import storage
from google.cloud.storage.exceptions import DataCorruption, InvalidResponse

from .constants import BenchmarkConstants
from .exceptions import ConfigError, DeleteError, UploadError
from .models import TransportMode
from .payload_source import RandomPayloadSource
from .storage_adapter import StorageClientAdapter


# Configure logging
logger = logging.getLogger(__name__)

# Resumable and streaming uploads report HTTP and checksum failures with their own exception types.
UPLOAD_ERRORS = (GoogleAPIError, InvalidResponse, DataCorruption, OSError)


class GcsStorageAdapter(StorageClientAdapter):
    """
    Uploads objects to a bucket addressed by ``gs://bucket/object`` URIs.

    ``TransportMode.SIMPLE`` leaves chunking to the library defaults;
    ``TransportMode.RESUMABLE`` forces a resumable session written in
    fixed-size chunks.
    """

    API_NAMES = {
        TransportMode.SIMPLE: "JSON",
        TransportMode.RESUMABLE: "resumable JSON",
    }

    def __init__(self, transport_mode: TransportMode, chunk_size: int,
                 payload: Optional[RandomPayloadSource] = None,
                 project: Optional[str] = None,
                 client: Optional[storage.Client] = None):
        self.transport_mode = transport_mode
        self.payload = payload
        self.chunk_size = chunk_size
        try:
            self._client = client or storage.Client(project=project)
        except DefaultCredentialsError as e:
            raise ConfigError(f"Cloud Storage credentials not found: {e}") from e
        self._closed = False

    @property
    def api_name(self) -> str:
        return self.API_NAMES[self.transport_mode]

    def _blob(self, destination: str) -> storage.Blob:
        if not destination.startswith(BenchmarkConstants.GCS_URI_PREFIX):
            raise ConfigError(f"Destination must be a gs:// URI, got {destination}")
        blob = storage.Blob.from_uri(destination, client=self._client)
        if self.transport_mode is TransportMode.RESUMABLE:
            blob.chunk_size = self.chunk_size
        return blob

    def upload_from_local_file(self, local_path: str, destination: str) -> int:
        blob = self._blob(destination)
        try:
            blob.upload_from_filename(local_path)
        except UPLOAD_ERRORS as e:
            logger.error(f"Upload of {local_path} to {destination} failed: {e}")
            raise UploadError(f"Upload to {destination} failed: {e}") from e
        return int(blob.size)

    def upload_bytes(self, size_in_bytes: int, destination: str) -> int:
        if self.payload is None:
            raise UploadError("No payload source configured for synthetic uploads")
        blob = self._blob(destination)
        try:
            with blob.open("wb", chunk_size=blob.chunk_size) as writer:
                for chunk in self.payload.iter_chunks(size_in_bytes):
                    writer.write(chunk)
            # the streaming writer does not refresh object metadata
            blob.reload()
        except UPLOAD_ERRORS as e:
            logger.error(f"Upload of {size_in_bytes} bytes to {destination} failed: {e}")
            raise UploadError(f"Upload to {destination} failed: {e}") from e
        return int(blob.size)

    def delete_object(self, destination: str) -> None:
        try:
            self._blob(destination).delete()
        except GoogleAPIError as e:
            raise DeleteError(f"Failed to delete {destination}: {e}") from e

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._client.close()
        logger.debug("Closed Cloud Storage client")
