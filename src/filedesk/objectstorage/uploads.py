"""Presigned upload authorization for browser-side uploads."""

from dataclasses import dataclass
from typing import Optional

from opentelemetry import trace

from filedesk.core import get_logger
from filedesk.core.config import StorageSettings
from filedesk.core.exceptions import FiledeskError, StorageOperationError
from filedesk.objectstorage.clients import S3ClientConfig, S3ClientManager
from filedesk.paths import build_object_key, public_url
from filedesk.schemas import UploadRequest

logger = get_logger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass(frozen=True)
class UploadAuthorization:
    """A presigned PUT URL and the key it writes to."""

    url: str
    key: str
    filename: str
    public_url: str
    expires_in: int


def create_upload_authorization(
    request: UploadRequest,
    storage: Optional[StorageSettings] = None,
    client_manager: Optional[S3ClientManager] = None,
    timestamp_ms: Optional[int] = None,
) -> UploadAuthorization:
    """Generate a time-limited authorization to upload one file.

    Args:
        request: File name, content type and optional folder
        storage: Storage settings; read from the environment when omitted
        client_manager: Client manager to reuse; built from settings otherwise
        timestamp_ms: Override for the key timestamp

    Returns:
        UploadAuthorization with the signed URL and generated key

    Raises:
        StorageConfigurationError: If bucket or client configuration is missing
        StorageOperationError: If signing fails
    """
    storage = storage or StorageSettings()
    bucket = storage.require_bucket()
    object_key = build_object_key(request.folder, request.filename, timestamp_ms)

    if client_manager is None:
        client_manager = S3ClientManager(S3ClientConfig.from_settings(storage))

    logger.info(
        "Creating upload authorization",
        bucket=bucket,
        key=object_key.key,
        content_type=request.content_type,
    )

    with tracer.start_as_current_span("filedesk.create_upload_authorization") as span:
        span.set_attribute("storage.bucket", bucket)
        span.set_attribute("storage.key", object_key.key)
        try:
            signed_url = client_manager.client.generate_presigned_url(
                "put_object",
                Params={
                    "Bucket": bucket,
                    "Key": object_key.key,
                    "ContentType": request.content_type,
                },
                ExpiresIn=storage.upload_url_expiry,
            )
        except FiledeskError:
            raise
        except Exception as e:
            error_msg = f"Failed to create upload URL for '{object_key.key}': {e}"
            logger.error(error_msg, error=str(e))
            raise StorageOperationError(error_msg)

    return UploadAuthorization(
        url=signed_url,
        key=object_key.key,
        filename=object_key.filename,
        public_url=public_url(storage.public_url, object_key.key),
        expires_in=storage.upload_url_expiry,
    )
