"""Command-line access to the redshift_utils URI helpers. Use --help for usage."""

import argparse
import json
import logging
import sys
import uuid
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from redshift_utils.config import RedshiftUtilsConfig, load_config, set_config
from redshift_utils.errors import ConfigurationError, UriParseError
from redshift_utils.logging import (
    get_logger,
    set_log_context,
    setup_logging,
    strip_uri_credentials,
)
from redshift_utils.storage import (
    S3LifecycleClient,
    check_that_bucket_has_object_lifecycle_configuration,
)
from redshift_utils.uri import (
    add_endpoint_to_url,
    fix_s3_url,
    get_region_for_redshift_cluster,
    join_urls,
    make_temp_path,
    remove_credentials_from_uri,
)

# Project root directory (where .env file is located)
# __main__.py is at src/redshift_utils/__main__.py, so root is 3 levels up
PROJECT_ROOT = Path(__file__).parent.parent.parent

logger = get_logger(__name__)


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m redshift_utils",
        description="Normalize storage URIs for the Redshift bulk loader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Redshift-compatible form of a Hadoop URI
    python -m redshift_utils fix-url s3a://bucket/tmp/

    # New staging directory under the configured temp root
    python -m redshift_utils temp-path

    # Region of a cluster
    python -m redshift_utils region jdbc:redshift://c.id.us-west-2.redshift.amazonaws.com:5439/db

    # Warn if the temp bucket has no lifecycle rule
    python -m redshift_utils check-lifecycle s3a://bucket/tmp/
        """,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.yaml (default: src/redshift_utils/config/config.yaml)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for JSON log files (default: log_dir from config)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    join = subparsers.add_parser("join", help="Join a root URI and a relative path")
    join.add_argument("root")
    join.add_argument("path")

    fix = subparsers.add_parser("fix-url", help="Rewrite s3n:// and s3a:// to s3://")
    fix.add_argument("url")

    endpoint = subparsers.add_parser("add-endpoint", help="Append the S3 endpoint domain to the host")
    endpoint.add_argument("url")
    endpoint.add_argument(
        "--domain",
        default=None,
        help="Endpoint domain (default: s3_endpoint_domain from config)",
    )

    temp = subparsers.add_parser("temp-path", help="Generate a random temp directory URI")
    temp.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Root URI (default: temp_root from config)",
    )

    sanitize = subparsers.add_parser("sanitize", help="Remove embedded credentials from a URI")
    sanitize.add_argument("uri")

    region = subparsers.add_parser("region", help="Region of a Redshift JDBC URL or hostname")
    region.add_argument("url")

    lifecycle = subparsers.add_parser(
        "check-lifecycle",
        help="Check the bucket lifecycle configuration for a temp directory",
    )
    lifecycle.add_argument("uri")

    return parser.parse_args(argv)


def _emit(args: argparse.Namespace, key: str, value) -> None:
    if args.json:
        print(json.dumps({key: value}))
    elif value is not None:
        print(value)


def run_command(args: argparse.Namespace, config: RedshiftUtilsConfig) -> int:
    if args.command == "join":
        _emit(args, "url", join_urls(args.root, args.path))

    elif args.command == "fix-url":
        _emit(args, "url", fix_s3_url(args.url))

    elif args.command == "add-endpoint":
        domain = args.domain or config.s3_endpoint_domain
        _emit(args, "url", add_endpoint_to_url(args.url, domain=domain))

    elif args.command == "temp-path":
        root = args.root or config.temp_root
        if not root:
            raise ConfigurationError("No root given and temp_root is not configured")
        _emit(args, "url", make_temp_path(root))

    elif args.command == "sanitize":
        _emit(args, "url", str(remove_credentials_from_uri(args.uri)))

    elif args.command == "region":
        region = get_region_for_redshift_cluster(args.url)
        _emit(args, "region", region)
        return 0 if region else 1

    elif args.command == "check-lifecycle":
        if not config.check_lifecycle:
            logger.info("Lifecycle check disabled by configuration")
            _emit(args, "checked", None)
            return 0
        client = S3LifecycleClient.from_config(config)
        checked = check_that_bucket_has_object_lifecycle_configuration(args.uri, client)
        _emit(args, "checked", checked)
        return 0 if checked else 1

    return 0


def main(argv: Optional[list] = None) -> int:
    load_dotenv(PROJECT_ROOT / ".env")
    args = parse_args(argv)

    try:
        config = load_config(config_path=args.config)
    except ConfigurationError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        return 2
    set_config(config)
    set_log_context(operation=args.command, trace_id=uuid.uuid4().hex)

    level = logging.DEBUG if args.verbose else logging.WARNING
    if config.log_to_stdout:
        setup_logging(log_to_stdout=True, file_level=level)
    else:
        setup_logging(log_dir=Path(args.log_dir or config.log_dir), console_level=level)

    try:
        return run_command(args, config)
    except (UriParseError, ConfigurationError) as e:
        logger.debug("Command failed", extra={"error_type": type(e).__name__})
        print(f"✗ {strip_uri_credentials(str(e))}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
