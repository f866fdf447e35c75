"""redshift_utils configuration from YAML file.

Loads the ``redshift_utils:`` section of a config.yaml:
- S3 endpoint domain used by add_endpoint_to_url()
- Default temp directory root for make_temp_path()
- boto3 region/endpoint for lifecycle lookups
- Logging destination

Environment variables ARE supported using ${VAR_NAME} syntax in YAML files.
"""

import json
import logging
import os
import re
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from redshift_utils.errors.exceptions import ConfigurationError, UriParseError
from redshift_utils.uri.models import StorageURI
from redshift_utils.uri.utils import DEFAULT_S3_ENDPOINT_DOMAIN, remove_credentials_from_uri

logger = logging.getLogger(__name__)

CONFIG_SECTION = "redshift_utils"

# Default config file: config.yaml next to this module
DEFAULT_CONFIG_FILE = Path(__file__).parent / "config.yaml"


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load YAML file and return dict."""
    if not path.exists():
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR_NAME} and ${VAR_NAME:-default} environment variables in config data."""
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        pattern = r"\$\{([^}:]+)(?::-(([^}]*))?)?\}"

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else match.group(0)
            return os.getenv(var_name, default_value)

        return re.sub(pattern, replacer, data)
    else:
        return data


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass
class RedshiftUtilsConfig:
    """URI and storage settings for the bulk loader.

    Configuration structure:
        redshift_utils:
          s3_endpoint_domain: s3.amazonaws.com
          temp_root: s3a://my-temp-bucket/redshift/
          aws_region: us-west-2
          s3_endpoint_url: ""          # custom S3 endpoint (MinIO, LocalStack)
          check_lifecycle: true
          logging:
            log_dir: logs
            log_to_stdout: false
    """

    s3_endpoint_domain: str = DEFAULT_S3_ENDPOINT_DOMAIN
    temp_root: str = ""
    aws_region: Optional[str] = None
    s3_endpoint_url: Optional[str] = None
    check_lifecycle: bool = True

    log_dir: str = "logs"
    log_to_stdout: bool = False

    def validate(self) -> None:
        """Raise ConfigurationError describing every invalid setting."""
        errors = []

        domain = self.s3_endpoint_domain
        if not domain:
            errors.append("s3_endpoint_domain must not be empty")
        elif "://" in domain or "/" in domain:
            errors.append(
                f"s3_endpoint_domain must be a bare domain name, got {domain!r}"
            )

        if self.temp_root:
            try:
                root = StorageURI.parse(self.temp_root)
            except UriParseError as e:
                errors.append(f"temp_root is not a valid URI: {e.message}")
            else:
                if not root.scheme or not root.host:
                    errors.append(
                        "temp_root must include a scheme and bucket, got "
                        f"{str(remove_credentials_from_uri(root))!r}"
                    )

        if errors:
            raise ConfigurationError(
                "Invalid redshift_utils configuration: " + "; ".join(errors)
            )

    def to_dict(self) -> Dict[str, Any]:
        """Settings as a dict, with credentials stripped from temp_root."""
        data = asdict(self)
        if self.temp_root:
            try:
                data["temp_root"] = str(remove_credentials_from_uri(self.temp_root))
            except UriParseError:
                data["temp_root"] = "<invalid>"
        return data


def load_config(config_path: Optional[Path] = None) -> RedshiftUtilsConfig:
    """Load configuration from config.yaml.

    A missing file yields defaults. Values under ``redshift_utils:`` override
    the defaults; unknown keys are rejected.

    Raises:
        ConfigurationError: If the file is malformed or a setting is invalid
    """
    config_path = config_path or DEFAULT_CONFIG_FILE

    try:
        yaml_data = _expand_env_vars(load_yaml(config_path))
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Could not parse {config_path}", cause=e, context={"config_path": str(config_path)}
        ) from e

    if not isinstance(yaml_data, dict):
        raise ConfigurationError(f"{config_path} must contain a YAML mapping")

    section = yaml_data.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{CONFIG_SECTION}' section in {config_path} must be a mapping")

    logging_section = section.pop("logging", None) or {}

    known_fields = set(RedshiftUtilsConfig.__dataclass_fields__)
    unknown = sorted(set(section) - known_fields)
    if unknown:
        raise ConfigurationError(
            f"Unknown settings in '{CONFIG_SECTION}': {', '.join(unknown)}"
        )

    config = RedshiftUtilsConfig(
        s3_endpoint_domain=section.get("s3_endpoint_domain") or DEFAULT_S3_ENDPOINT_DOMAIN,
        temp_root=section.get("temp_root") or "",
        aws_region=section.get("aws_region") or None,
        s3_endpoint_url=section.get("s3_endpoint_url") or None,
        check_lifecycle=_to_bool(section.get("check_lifecycle", True)),
        log_dir=str(logging_section.get("log_dir", section.get("log_dir", "logs"))),
        log_to_stdout=_to_bool(
            logging_section.get("log_to_stdout", section.get("log_to_stdout", False))
        ),
    )
    config.validate()

    logger.debug("Loaded configuration", extra={"config_path": str(config_path)})
    return config


# Singleton instance
_config: Optional[RedshiftUtilsConfig] = None


def get_config() -> RedshiftUtilsConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: RedshiftUtilsConfig) -> None:
    global _config
    _config = config


def reset_config() -> None:
    global _config
    _config = None


def _cli_main(argv: Optional[list] = None) -> int:
    """CLI entry point for config validation and debugging."""
    import argparse

    parser = argparse.ArgumentParser(
        description="redshift_utils Configuration Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate configuration
  python -m redshift_utils.config.config --validate

  # Show effective configuration
  python -m redshift_utils.config.config --show-merged

  # JSON output for automation
  python -m redshift_utils.config.config --validate --show-merged --json
        """,
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate configuration structure and values",
    )
    parser.add_argument(
        "--show-merged",
        action="store_true",
        help="Display effective configuration as YAML",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.yaml file (default: src/redshift_utils/config/config.yaml)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format instead of human-readable",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not args.validate and not args.show_merged:
        parser.print_help()
        return 0

    try:
        config = load_config(config_path=args.config)
    except ConfigurationError as e:
        if args.json:
            print(json.dumps({"error": str(e)}))
        else:
            print(f"✗ Validation error: {e}", file=sys.stderr)
        return 1

    output: Dict[str, Any] = {}
    if args.validate:
        if args.json:
            output["validation"] = {"passed": True, "errors": []}
        else:
            print("✓ Configuration validation passed")

    if args.show_merged:
        if args.json:
            output["merged_config"] = config.to_dict()
        else:
            print(yaml.dump({CONFIG_SECTION: config.to_dict()}, default_flow_style=False, sort_keys=False))

    if args.json:
        print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(_cli_main())
