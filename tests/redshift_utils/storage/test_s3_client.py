"""Tests for the boto3-backed S3LifecycleClient."""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from redshift_utils.config import RedshiftUtilsConfig
from redshift_utils.errors import LifecycleLookupError
from redshift_utils.storage import LifecycleStatus, S3LifecycleClient


def _client_error(code: str, message: str = "error") -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": message}},
        "GetBucketLifecycleConfiguration",
    )


class TestGetBucketLifecycleConfiguration:

    def test_converts_rules(self):
        boto_client = MagicMock()
        boto_client.get_bucket_lifecycle_configuration.return_value = {
            "Rules": [
                {"ID": "expire-tmp", "Filter": {"Prefix": "tmp/"}, "Status": "Enabled"},
                {"ID": "old", "Prefix": "", "Status": "Disabled"},
            ]
        }

        rules = S3LifecycleClient(boto_client).get_bucket_lifecycle_configuration("bucket")

        boto_client.get_bucket_lifecycle_configuration.assert_called_once_with(Bucket="bucket")
        assert [r.rule_id for r in rules] == ["expire-tmp", "old"]
        assert rules[0].prefix == "tmp/"
        assert rules[1].status == LifecycleStatus.DISABLED

    def test_missing_configuration_is_empty(self):
        boto_client = MagicMock()
        boto_client.get_bucket_lifecycle_configuration.side_effect = _client_error(
            "NoSuchLifecycleConfiguration"
        )
        assert S3LifecycleClient(boto_client).get_bucket_lifecycle_configuration("bucket") == []

    def test_access_denied_is_wrapped(self):
        boto_client = MagicMock()
        boto_client.get_bucket_lifecycle_configuration.side_effect = _client_error(
            "AccessDenied", "Access Denied"
        )

        with pytest.raises(LifecycleLookupError) as exc_info:
            S3LifecycleClient(boto_client).get_bucket_lifecycle_configuration("bucket")

        err = exc_info.value
        assert err.context["bucket"] == "bucket"
        assert err.context["error_code"] == "AccessDenied"
        assert err.context["error_category"] == "permanent"
        assert isinstance(err.cause, ClientError)

    def test_connection_error_is_wrapped(self):
        boto_client = MagicMock()
        boto_client.get_bucket_lifecycle_configuration.side_effect = EndpointConnectionError(
            endpoint_url="https://s3.amazonaws.com"
        )

        with pytest.raises(LifecycleLookupError) as exc_info:
            S3LifecycleClient(boto_client).get_bucket_lifecycle_configuration("bucket")

        assert exc_info.value.context["error_type"] == "EndpointConnectionError"
        assert exc_info.value.is_retryable

    def test_response_without_rules(self):
        boto_client = MagicMock()
        boto_client.get_bucket_lifecycle_configuration.return_value = {}
        assert S3LifecycleClient(boto_client).get_bucket_lifecycle_configuration("bucket") == []


class TestCreate:

    def test_from_config_uses_region_and_endpoint(self):
        config = RedshiftUtilsConfig(aws_region="us-west-2", s3_endpoint_url="http://localhost:9000")

        with patch("redshift_utils.storage.s3_client.boto3.session.Session") as session_cls:
            client = S3LifecycleClient.from_config(config)

        session_cls.assert_called_once_with(region_name="us-west-2")
        session_cls.return_value.client.assert_called_once_with(
            "s3", endpoint_url="http://localhost:9000"
        )
        assert client.client is session_cls.return_value.client.return_value

    def test_create_without_region(self):
        with patch("redshift_utils.storage.s3_client.boto3.session.Session") as session_cls:
            S3LifecycleClient.create()

        session_cls.assert_called_once_with()
        session_cls.return_value.client.assert_called_once_with("s3", endpoint_url=None)
