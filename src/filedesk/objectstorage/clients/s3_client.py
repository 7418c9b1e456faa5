"""S3 client configuration and management.

This module provides S3 client configuration and management for the
S3-compatible store behind the file manager (Cloudflare R2 in production,
MinIO or AWS S3 elsewhere).

Authentication Methods Supported:
    1. Explicit credentials (access_key_id, secret_access_key)
    2. AWS CLI profiles (aws_profile)
    3. IAM roles / environment variables (no explicit credentials)

Endpoints:
    An explicit endpoint_url wins. Otherwise, when an R2 account_id is set,
    the endpoint is derived as https://<account_id>.r2.cloudflarestorage.com.
"""

from typing import Any, Dict, Optional

import boto3
from pydantic import BaseModel, ConfigDict, Field

from filedesk.core import get_logger
from filedesk.core.config import StorageSettings
from filedesk.core.exceptions import StorageConfigurationError

logger = get_logger(__name__)

R2_ENDPOINT_TEMPLATE = "https://{account_id}.r2.cloudflarestorage.com"


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Example:
        # Cloudflare R2
        config = S3ClientConfig(
            account_id="0123abcd",
            access_key_id="...",
            secret_access_key="...",
        )

        # MinIO endpoint
        config = S3ClientConfig(
            endpoint_url="http://localhost:9000",
            access_key_id="minioadmin",
            secret_access_key="minioadmin",
            region_name="us-east-1",
        )
    """

    model_config = ConfigDict(extra="forbid")

    access_key_id: Optional[str] = Field(None, description="Access key ID")
    secret_access_key: Optional[str] = Field(None, description="Secret access key")
    session_token: Optional[str] = Field(
        None, description="Session token for temporary credentials"
    )
    region_name: str = Field("auto", description="Region name ('auto' for R2)")
    endpoint_url: Optional[str] = Field(
        None, description="Custom endpoint URL for S3-compatible services"
    )
    account_id: Optional[str] = Field(
        None, description="Cloudflare account ID used to derive the R2 endpoint"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )

    @classmethod
    def from_settings(cls, storage: StorageSettings) -> "S3ClientConfig":
        """Build a client configuration from storage settings."""
        return cls(
            access_key_id=storage.access_key_id,
            secret_access_key=storage.secret_access_key,
            region_name=storage.region_name,
            endpoint_url=storage.endpoint_url,
            account_id=storage.account_id,
        )

    def resolved_endpoint(self) -> Optional[str]:
        """Return the endpoint URL to use, if any."""
        if self.endpoint_url:
            return self.endpoint_url
        if self.account_id:
            return R2_ENDPOINT_TEMPLATE.format(account_id=self.account_id)
        return None


class S3ClientManager:
    """Manages S3 client connections."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        if bool(self.config.access_key_id) != bool(self.config.secret_access_key):
            raise StorageConfigurationError(
                "Both access_key_id and secret_access_key must be set"
            )

        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
        }

        endpoint_url = self.config.resolved_endpoint()
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url

        try:
            if self.config.aws_profile:
                session = boto3.Session(profile_name=self.config.aws_profile)
                client = session.client("s3", **kwargs)  # type: ignore
                logger.info(
                    "S3 client created with profile", profile=self.config.aws_profile
                )
            else:
                if self.config.access_key_id and self.config.secret_access_key:
                    kwargs.update(
                        {
                            "aws_access_key_id": self.config.access_key_id,
                            "aws_secret_access_key": self.config.secret_access_key,
                        }
                    )
                    if self.config.session_token:
                        kwargs["aws_session_token"] = self.config.session_token
                    logger.info("S3 client created with explicit credentials")
                else:
                    logger.info("S3 client created with default credential chain")

                client = boto3.client("s3", **kwargs)  # type: ignore
        except Exception as e:
            raise StorageConfigurationError(f"Failed to create S3 client: {e}")

        return client
