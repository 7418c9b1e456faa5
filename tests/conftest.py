"""Test configuration and fixtures for filedesk."""

import boto3
import pytest
from moto import mock_aws

from filedesk.core.config import StorageSettings
from filedesk.objectstorage.clients import S3ClientConfig, S3ClientManager

TEST_BUCKET = "test-bucket"
PUBLIC_URL = "https://files.example.com"


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def storage_settings():
    """Storage settings pointing at the mocked bucket."""
    return StorageSettings(
        bucket_name=TEST_BUCKET,
        public_url=PUBLIC_URL,
        access_key_id="test_key",
        secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,
        account_id=None,
    )


@pytest.fixture
def s3_client(aws_credentials):
    """Mocked S3 with an empty test bucket."""
    with mock_aws():
        client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        client.create_bucket(Bucket=TEST_BUCKET)
        yield client


@pytest.fixture
def client_manager(s3_client, storage_settings):
    """Client manager created inside the moto context."""
    return S3ClientManager(S3ClientConfig.from_settings(storage_settings))


@pytest.fixture
def file_tree(s3_client):
    """A small client folder layout with an empty-folder placeholder."""
    s3_client.put_object(Bucket=TEST_BUCKET, Key="clients/", Body=b"")
    s3_client.put_object(Bucket=TEST_BUCKET, Key="clients/acme/", Body=b"")
    s3_client.put_object(
        Bucket=TEST_BUCKET, Key="clients/acme/logo.png", Body=b"png-bytes"
    )
    s3_client.put_object(
        Bucket=TEST_BUCKET, Key="clients/acme/2024/report.pdf", Body=b"report"
    )
    s3_client.put_object(
        Bucket=TEST_BUCKET, Key="clients/acme/2024/q1/invoice.pdf", Body=b"inv"
    )
    s3_client.put_object(
        Bucket=TEST_BUCKET, Key="clients/globex/contract.pdf", Body=b"contract"
    )
    return s3_client
