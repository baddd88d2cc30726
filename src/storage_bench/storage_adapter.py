"""Port between the benchmark harness and a storage client library."""
from abc import ABC, abstractmethod


class StorageClientAdapter(ABC):
    """
    Abstract interface for the remote store being benchmarked.

    One adapter is created before the first iteration and reused for every
    upload. ``close`` releases the underlying connections and may be called
    more than once; using the adapter as a context manager guarantees it runs
    on both the success and the abort path.
    """

    api_name: str = "storage"

    @abstractmethod
    def upload_from_local_file(self, local_path: str, destination: str) -> int:
        """
        Upload a local file, overwriting ``destination``.

        Returns:
            The number of bytes written.

        Raises:
            UploadError: If the backend rejects or interrupts the write.
        """
        pass

    @abstractmethod
    def upload_bytes(self, size_in_bytes: int, destination: str) -> int:
        """
        Stream ``size_in_bytes`` bytes of random payload to ``destination``.

        Returns:
            The size of the remote object once finalized.

        Raises:
            UploadError: If the backend rejects or interrupts the write.
        """
        pass

    @abstractmethod
    def delete_object(self, destination: str) -> None:
        """
        Remove ``destination`` from the store.

        Raises:
            DeleteError: If the object could not be removed.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "StorageClientAdapter":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
