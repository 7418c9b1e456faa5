"""S3 prefix listing for the file manager's folder/file view."""

from typing import Optional

from opentelemetry import trace

from filedesk.core import get_logger
from filedesk.core.config import StorageSettings
from filedesk.core.exceptions import FiledeskError, StorageOperationError
from filedesk.objectstorage.clients import S3ClientConfig, S3ClientManager

from .tree import DELIMITER, Listing, project_listing

logger = get_logger(__name__)
tracer = trace.get_tracer(__name__)


class S3PrefixLister:
    """Lists the immediate folders and files under a bucket prefix."""

    def __init__(
        self,
        client_manager: S3ClientManager,
        bucket: str,
        public_base_url: str = "",
    ):
        """Initialize S3 prefix lister.

        Args:
            client_manager: Manager providing the boto3 client
            bucket: Bucket to list
            public_base_url: Base URL used to build public file links
        """
        self.client_manager = client_manager
        self.bucket = bucket
        self.public_base_url = public_base_url
        logger.info("S3 prefix lister initialized", bucket=bucket)

    def list_tree(self, prefix: str = "", recursive: bool = False) -> Listing:
        """List a prefix as folders and files.

        For example, with objects:
        - clients/acme/
        - clients/acme/logo.png
        - clients/acme/2024/report.pdf

        Listing ``clients/acme/`` returns the folder ``2024`` and the file
        ``logo.png``; the placeholder ``clients/acme/`` is not a file. With
        ``recursive=True`` the same call returns ``logo.png`` and
        ``2024/report.pdf`` as files and no folders.

        The prefix is sent exactly as given; folder keys returned by a
        previous listing already carry their trailing slash. Pass folder
        ``full_key``s: a prefix without the trailing slash (``clients``)
        matches the folder itself, which comes back as a folder with an
        empty name.

        Args:
            prefix: Key prefix to list ("" for the bucket root)
            recursive: List every key below the prefix instead of one level

        Returns:
            Listing built from all result pages

        Raises:
            StorageOperationError: If the store call fails
        """
        logger.info(
            "Listing S3 prefix", bucket=self.bucket, prefix=prefix, recursive=recursive
        )

        with tracer.start_as_current_span("filedesk.list_tree") as span:
            span.set_attribute("storage.bucket", self.bucket)
            span.set_attribute("storage.prefix", prefix)
            span.set_attribute("storage.recursive", recursive)
            try:
                client = self.client_manager.client

                params = {"Bucket": self.bucket, "Prefix": prefix}
                if not recursive:
                    params["Delimiter"] = DELIMITER

                contents = []
                common_prefixes = []

                # Use paginator to handle large numbers of keys
                paginator = client.get_paginator("list_objects_v2")
                for page in paginator.paginate(**params):
                    contents.extend(page.get("Contents", []))
                    for prefix_info in page.get("CommonPrefixes", []):
                        common_prefixes.append(prefix_info["Prefix"])

            except FiledeskError:
                raise
            except Exception as e:
                error_msg = f"Failed to list objects for prefix '{prefix}': {e}"
                logger.error(error_msg, bucket=self.bucket, error=str(e))
                raise StorageOperationError(error_msg)

        listing = project_listing(
            prefix, contents, common_prefixes, public_base_url=self.public_base_url
        )
        logger.info(
            "S3 prefix listed",
            bucket=self.bucket,
            prefix=prefix,
            folder_count=len(listing.folders),
            file_count=len(listing.files),
        )
        return listing


def _lister_from_settings(
    storage: Optional[StorageSettings],
    client_manager: Optional[S3ClientManager],
) -> S3PrefixLister:
    storage = storage or StorageSettings()
    bucket = storage.require_bucket()
    if client_manager is None:
        client_manager = S3ClientManager(S3ClientConfig.from_settings(storage))
    return S3PrefixLister(client_manager, bucket, public_base_url=storage.public_url)


def list_files(
    path: str = "",
    recursive: bool = False,
    storage: Optional[StorageSettings] = None,
    client_manager: Optional[S3ClientManager] = None,
) -> Listing:
    """Convenience function to list a prefix using configured storage.

    Raises:
        StorageConfigurationError: If no bucket is configured
        StorageOperationError: If the store call fails
    """
    return _lister_from_settings(storage, client_manager).list_tree(path, recursive)


def browse_files(
    path: str = "",
    recursive: bool = False,
    storage: Optional[StorageSettings] = None,
    client_manager: Optional[S3ClientManager] = None,
) -> Listing:
    """List a prefix for display, degrading to an empty listing on failure.

    Upstream failures produce an empty Listing whose ``error`` holds the
    message, never a partial one. Configuration errors still raise.
    """
    lister = _lister_from_settings(storage, client_manager)
    try:
        return lister.list_tree(path, recursive)
    except StorageOperationError as e:
        logger.warning("Returning empty listing", prefix=path, error=str(e))
        return Listing(error=str(e))
