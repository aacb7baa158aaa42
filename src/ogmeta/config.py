from dotenv import load_dotenv
from dataclasses import dataclass
from pathlib import Path
import json
import os

import yaml

from ogmeta.constants import (
    BASELINE_LOCALE,
    DEFAULT_AVATAR_SIZE,
    DEFAULT_EXCERPT_LENGTH,
    DEFAULT_EXCERPT_MORE,
    DEFAULT_FILTER_PREFIX,
    DEFAULT_HTML_PARSER,
    DEFAULT_IMAGE_SIZE,
)

load_dotenv()  # Loads variables from .env file


class Settings:
    """
    Manages process-level settings loaded from environment variables.
    """
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
    LOG_FILE = os.getenv("LOG_FILE")


settings = Settings()


@dataclass
class SiteConfig:
    """Site-wide values and tunables for meta generation."""

    # Site identity
    site_name: str = ""
    tagline: str = ""
    site_url: str = ""
    locale: str = BASELINE_LOCALE

    # Facebook namespace defaults
    fb_admins: str = ""
    fb_app_id: str = ""

    # Excerpts
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH
    excerpt_more: str = DEFAULT_EXCERPT_MORE

    # Images
    image_size: str = DEFAULT_IMAGE_SIZE
    avatar_size: int = DEFAULT_AVATAR_SIZE

    # BeautifulSoup tree builder for avatar markup
    html_parser: str = DEFAULT_HTML_PARSER

    # Base name of the record filters
    filter_prefix: str = DEFAULT_FILTER_PREFIX

    @classmethod
    def from_env(cls) -> "SiteConfig":
        """Load configuration from environment variables.

        Environment variables should be prefixed with OGMETA_
        e.g., OGMETA_SITE_NAME="Acme", OGMETA_EXCERPT_LENGTH=30

        Returns:
            SiteConfig with values from environment
        """
        config = cls()
        prefix = "OGMETA_"

        for field_name in config.__dataclass_fields__:
            env_key = f"{prefix}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                field_type = config.__dataclass_fields__[field_name].type
                try:
                    if field_type in (int, "int"):
                        setattr(config, field_name, int(env_value))
                    else:
                        setattr(config, field_name, env_value)
                except ValueError:
                    pass  # Keep default if conversion fails

        return config

    @classmethod
    def from_file(cls, path: str) -> "SiteConfig":
        """Load configuration from a YAML or JSON file.

        Args:
            path: Path to configuration file

        Returns:
            SiteConfig with values from file

        Raises:
            ValueError: If the file is malformed or holds an unconvertible value
        """
        file_path = Path(path)

        if not file_path.exists():
            return cls()

        with open(file_path, 'r') as f:
            if file_path.suffix == '.json':
                data = json.load(f)
            else:
                try:
                    data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ValueError(f"Cannot parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping")

        return cls.from_dict(data.get('site', data))

    @classmethod
    def from_dict(cls, data: dict) -> "SiteConfig":
        """Build from a mapping, ignoring keys that are not config fields.

        Raises:
            ValueError: If a value cannot be converted to its field type
        """
        config = cls()

        for field_name, field_def in config.__dataclass_fields__.items():
            value = data.get(field_name)
            if value is None:
                continue

            if field_def.type in (int, "int"):
                try:
                    value = int(value)
                except (TypeError, ValueError) as e:
                    raise ValueError(f"{field_name} must be an integer, got {value!r}") from e
            else:
                value = str(value)
            setattr(config, field_name, value)

        return config
