"""Error taxonomy shared by the upload pipeline and the HTTP layer.

Each error carries the HTTP status it is answered with; the handlers in
``videohub.main`` render every one of them as ``{"error": message}``.
"""

from fastapi import status


class VideoHubError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(VideoHubError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationError(VideoHubError):
    status_code = status.HTTP_400_BAD_REQUEST


class PayloadTooLargeError(VideoHubError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE


class ProcessingError(VideoHubError):
    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class StorageError(VideoHubError):
    pass


class LocatorError(StorageError):
    pass


class PersistenceError(VideoHubError):
    pass


class VideoNotFoundError(PersistenceError):
    status_code = status.HTTP_404_NOT_FOUND
