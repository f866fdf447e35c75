"""
In-memory storage client for tests.

Stands in for S3LifecycleClient wherever a StorageClient is injected:

    client = InMemoryLifecycleClient(
        {"temp-bucket": [LifecycleRule(status=LifecycleStatus.ENABLED)]}
    )
    assert check_that_bucket_has_object_lifecycle_configuration(
        "s3a://temp-bucket/dir", client
    )
    assert client.calls == ["temp-bucket"]
"""

from typing import Dict, List, Optional, Sequence

from redshift_utils.storage.models import LifecycleRule


class InMemoryLifecycleClient:
    """Dict-backed StorageClient that records every lookup."""

    def __init__(
        self,
        rules: Optional[Dict[str, Sequence[LifecycleRule]]] = None,
        error: Optional[Exception] = None,
    ):
        self.rules: Dict[str, List[LifecycleRule]] = {
            bucket: list(bucket_rules) for bucket, bucket_rules in (rules or {}).items()
        }
        self.error = error
        self.calls: List[str] = []

    def set_rules(self, bucket_name: str, rules: Sequence[LifecycleRule]) -> None:
        self.rules[bucket_name] = list(rules)

    def get_bucket_lifecycle_configuration(self, bucket_name: str) -> List[LifecycleRule]:
        self.calls.append(bucket_name)
        if self.error is not None:
            raise self.error
        return list(self.rules.get(bucket_name, []))
