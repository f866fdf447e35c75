"""
Tests for exception hierarchy and error classification.
"""

from redshift_utils.errors import (
    ConfigurationError,
    ErrorCategory,
    LifecycleLookupError,
    PermanentError,
    RedshiftUtilsError,
    TransientError,
    UriParseError,
    classify_exception,
    wrap_exception,
)


class TestErrorCategory:
    """Test ErrorCategory enum."""

    def test_all_categories_exist(self):
        assert ErrorCategory.TRANSIENT.value == "transient"
        assert ErrorCategory.PERMANENT.value == "permanent"
        assert ErrorCategory.UNKNOWN.value == "unknown"


class TestRedshiftUtilsError:
    """Test base RedshiftUtilsError class."""

    def test_basic_error(self):
        err = RedshiftUtilsError("Something went wrong")
        assert err.message == "Something went wrong"
        assert err.cause is None
        assert err.context == {}
        assert err.category == ErrorCategory.UNKNOWN

    def test_str_includes_cause(self):
        err = RedshiftUtilsError("Lookup failed", cause=ValueError("bad"))
        assert str(err) == "Lookup failed | Caused by: bad"

    def test_unknown_is_retryable(self):
        assert RedshiftUtilsError("x").is_retryable


class TestDomainErrors:

    def test_uri_parse_error_is_permanent_value_error(self):
        err = UriParseError("bad uri", uri="s3://b:x/k")
        assert isinstance(err, PermanentError)
        assert isinstance(err, ValueError)
        assert err.uri == "s3://b:x/k"
        assert not err.is_retryable

    def test_uri_parse_error_message_excludes_uri(self):
        err = UriParseError("Invalid port", uri="s3n://KEY:SECRET@b:x/k")
        assert "SECRET" not in str(err)

    def test_uri_parse_error_str_omits_cause(self):
        cause = ValueError("netloc 'KEY:TOP\uff03SECRET@b' contains invalid characters")
        err = UriParseError("Invalid URI authority", uri="s3n://KEY:TOP\uff03SECRET@b/k", cause=cause)

        assert str(err) == "Invalid URI authority"
        assert err.cause is cause

    def test_lifecycle_lookup_error_is_transient(self):
        err = LifecycleLookupError("timeout")
        assert isinstance(err, TransientError)
        assert err.is_retryable

    def test_configuration_error_is_permanent(self):
        assert ConfigurationError("bad").category == ErrorCategory.PERMANENT


class TestClassifyException:

    def test_typed_errors_use_their_category(self):
        assert classify_exception(UriParseError("x")) == ErrorCategory.PERMANENT
        assert classify_exception(LifecycleLookupError("x")) == ErrorCategory.TRANSIENT

    def test_builtin_timeout_is_transient(self):
        assert classify_exception(TimeoutError("read")) == ErrorCategory.TRANSIENT

    def test_access_denied_is_permanent(self):
        assert classify_exception(Exception("AccessDenied: Access Denied")) == ErrorCategory.PERMANENT

    def test_slow_down_is_transient(self):
        assert classify_exception(Exception("SlowDown: Please reduce your request rate")) == ErrorCategory.TRANSIENT

    def test_unrecognized_is_unknown(self):
        assert classify_exception(KeyError("x")) == ErrorCategory.UNKNOWN


class TestWrapException:

    def test_wraps_in_default_class(self):
        original = RuntimeError("connection reset by peer")
        wrapped = wrap_exception(original, LifecycleLookupError, context={"bucket": "b"})

        assert isinstance(wrapped, LifecycleLookupError)
        assert wrapped.cause is original
        assert wrapped.context == {
            "bucket": "b",
            "error_type": "RuntimeError",
            "error_category": "transient",
        }

    def test_existing_error_gets_context_merged(self):
        original = UriParseError("bad")
        wrapped = wrap_exception(original, context={"field": "temp_root"})

        assert wrapped is original
        assert wrapped.context == {"field": "temp_root"}
