"""Application configuration: settings schema and helpbook.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from helpbook.core.models import BookMetadata, Theme


CONFIG_FILE = "helpbook.yaml"
ENV_PREFIX = "HELPBOOK_"


class Settings(BaseModel):
    provider:          str = Field(default="hugo", description="Content provider identifier")
    bundle_identifier: Optional[str] = Field(default=None, description="Defaults to com.example.<name>.help")
    bundle_name:       Optional[str] = Field(default=None, description="Defaults to the content folder name")
    help_book_title:   Optional[str] = Field(default=None, description="Defaults to '<name> Help'")
    bundle_version:    str = "1.0"
    bundle_short_version: str = "1.0"
    development_region: str = "en"
    content_dir:       str = Field(default="content", description="Markdown content root")
    assets_dir:        Optional[str] = Field(default=None, description="Separate assets root, scanned after content")
    output_dir:        str = Field(default="dist", description="Directory the .help bundle is written into")
    base_url:          str = Field(default="", description="Public URL whose links are rewritten to relative links")
    theme:             Theme = Theme.modern
    custom_css:        Optional[str] = Field(default=None, description="Stylesheet for the custom theme")
    parser_config:     str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    include_sidebar:   bool = True
    include_drafts:    bool = False
    max_workers:       int = Field(default=8, ge=1, description="Threads for parsing and writing pages")

    @model_validator(mode="after")
    def _custom_theme_needs_css(self) -> "Settings":
        if self.theme == Theme.custom and not self.custom_css:
            raise ValueError("theme 'custom' requires custom_css")
        return self

    def book_metadata(self, name: str) -> BookMetadata:
        """Bundle metadata with defaults derived from the content folder name."""
        return BookMetadata(
            bundle_identifier=self.bundle_identifier or f"com.example.{name}.help",
            bundle_name=self.bundle_name or name,
            help_book_title=self.help_book_title or f"{name} Help",
            bundle_version=self.bundle_version,
            bundle_short_version=self.bundle_short_version,
            development_region=self.development_region,
            theme=self.theme,
            base_url=self.base_url,
        )


def load_config(overrides: dict[str, Any] = None, config_file: Path = None) -> Settings:
    """Load Settings from helpbook.yaml, then HELPBOOK_<FIELD> env vars, then non-None CLI overrides."""
    path = Path(config_file or CONFIG_FILE)
    data: dict[str, Any] = {}
    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {path.name}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {path.name}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def default_config_yaml() -> str:
    """Template helpbook.yaml with every user-facing field at its default."""
    fields = Settings().model_dump(mode="json")
    return yaml.safe_dump(fields, sort_keys=False, allow_unicode=True)
