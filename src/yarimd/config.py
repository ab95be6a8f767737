"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "yarimd"
    content_root:  str = Field(default=".",         description="Directory file paths are made relative to")
    resources_dir: str = Field(default="resources", description="Local resource directory under content_root")
    domain:        str = Field(default="https://developer.mozilla.org", description="Canonical documentation domain")
    locale:        str = Field(default="en-US", pattern=r"^[a-z]{2}(-[A-Za-z]{2,4})?$", description="Docs locale path segment")
    assets_dir:    str = Field(default="assets",    description="Folder images are moved under")
    log_level:     str = Field(default="WARNING", pattern="^(TRACE|DEBUG|INFO|SUCCESS|WARNING|ERROR)$")

    @property
    def docs_prefix(self) -> str:
        """Root-relative documentation path, e.g. /en-US/docs/"""
        return f"/{self.locale}/docs/"

    @property
    def docs_url(self) -> str:
        return f"{self.domain.rstrip('/')}{self.docs_prefix}"

    @property
    def glossary_url(self) -> str:
        return f"{self.docs_url}Glossary/"

    @property
    def api_url(self) -> str:
        return f"{self.docs_url}Web/API/"

    @property
    def element_url(self) -> str:
        return f"{self.docs_url}Web/HTML/Element/"

    @property
    def css_url(self) -> str:
        return f"{self.docs_url}Web/CSS/"

    @property
    def http_status_url(self) -> str:
        return f"{self.docs_url}Web/HTTP/Status/"

    @property
    def resources_path(self) -> Path:
        return Path(self.content_root) / self.resources_dir


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then YARIMD_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"YARIMD_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
