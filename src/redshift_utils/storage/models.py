"""
Bucket lifecycle rule schema.

Contains the Pydantic model for one entry of an S3 bucket lifecycle
configuration, as returned by ``GetBucketLifecycleConfiguration``.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LifecycleStatus(str, Enum):
    """Rule status as reported by S3."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


class LifecycleRule(BaseModel):
    """Schema for a single bucket lifecycle rule.

    Attributes:
        rule_id: Optional rule identifier (S3 ``ID``)
        prefix: Key prefix the rule applies to; None means the whole bucket
        status: ENABLED rules are active, DISABLED rules are inert

    Example:
        >>> rule = LifecycleRule.from_s3(
        ...     {"ID": "expire-temp", "Filter": {"Prefix": "tmp/"}, "Status": "Enabled"}
        ... )
        >>> rule.prefix
        'tmp/'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rule_id: Optional[str] = Field(
        default=None,
        alias="ID",
        description="Rule identifier",
    )
    prefix: Optional[str] = Field(
        default=None,
        alias="Prefix",
        description="Key prefix the rule applies to (None = whole bucket)",
    )
    status: LifecycleStatus = Field(
        ...,
        alias="Status",
        description="Enabled or Disabled",
    )

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: Any) -> Any:
        """Accept ENABLED/enabled spellings as well as S3's Enabled."""
        if isinstance(v, str):
            return v.strip().capitalize()
        return v

    @property
    def is_enabled(self) -> bool:
        return self.status == LifecycleStatus.ENABLED

    def applies_to(self, key: str) -> bool:
        """True if this rule is enabled and covers the given object key."""
        return self.is_enabled and (self.prefix is None or key.startswith(self.prefix))

    @classmethod
    def from_s3(cls, rule: Dict[str, Any]) -> "LifecycleRule":
        """
        Build a rule from a boto3 ``get_bucket_lifecycle_configuration`` entry.

        The prefix is read from the legacy top-level ``Prefix`` or from the
        ``Filter`` element (``Filter.Prefix`` or ``Filter.And.Prefix``).
        """
        prefix = rule.get("Prefix")
        rule_filter = rule.get("Filter") or {}
        if prefix is None:
            prefix = rule_filter.get("Prefix")
        if prefix is None:
            prefix = (rule_filter.get("And") or {}).get("Prefix")

        return cls(rule_id=rule.get("ID"), prefix=prefix, status=rule["Status"])
