"""Deletion of stored objects by public URL or key."""

from typing import Optional

from opentelemetry import trace

from filedesk.core import get_logger
from filedesk.core.config import StorageSettings
from filedesk.core.exceptions import FiledeskError, StorageOperationError
from filedesk.objectstorage.clients import S3ClientConfig, S3ClientManager
from filedesk.paths import decode_object_key, key_from_public_url
from filedesk.schemas import DeleteRequest, parse_request

logger = get_logger(__name__)
tracer = trace.get_tracer(__name__)


def delete_object(
    url: Optional[str] = None,
    key: Optional[str] = None,
    storage: Optional[StorageSettings] = None,
    client_manager: Optional[S3ClientManager] = None,
) -> str:
    """Delete the object a public URL or key points to.

    An explicit ``key`` is only URI-decoded; a ``url`` has the public base
    URL (or the host of any http(s) URL) stripped first.

    Args:
        url: Previously issued public URL
        key: Object key
        storage: Storage settings; read from the environment when omitted
        client_manager: Client manager to reuse; built from settings otherwise

    Returns:
        The key that was deleted

    Raises:
        ValidationError: If neither url nor key is given or no key can be derived
        StorageConfigurationError: If bucket or client configuration is missing
        StorageOperationError: If the delete call fails
    """
    request = parse_request(DeleteRequest, url=url, key=key)
    storage = storage or StorageSettings()
    bucket = storage.require_bucket()

    if request.key:
        object_key = decode_object_key(request.key)
    else:
        object_key = key_from_public_url(request.url or "", storage.public_url)

    if client_manager is None:
        client_manager = S3ClientManager(S3ClientConfig.from_settings(storage))

    logger.info("Deleting object", bucket=bucket, key=object_key)

    with tracer.start_as_current_span("filedesk.delete_object") as span:
        span.set_attribute("storage.bucket", bucket)
        span.set_attribute("storage.key", object_key)
        try:
            client_manager.client.delete_object(Bucket=bucket, Key=object_key)
        except FiledeskError:
            raise
        except Exception as e:
            error_msg = f"Failed to delete object '{object_key}': {e}"
            logger.error(error_msg, error=str(e))
            raise StorageOperationError(error_msg)

    logger.info("Object deleted", bucket=bucket, key=object_key)
    return object_key
