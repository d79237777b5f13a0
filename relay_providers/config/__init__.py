"""Unified settings layer for provider clients.

Goals
-----
* Centralize defaults (base URLs, models, generation options).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional settings file (JSON or YAML) passed in or named by
       ``RELAY_SETTINGS_FILE``
    3. Environment variables (``OPENAI_API_KEY``, ``ANTHROPIC_BASE_URL``,
       ``AZURE_OPENAI_MODEL``, ``RELAY_API_PROVIDER`` ...)
    4. In-code overrides passed to :func:`load_settings`
* Provide a single typed :class:`Settings` object that provider clients read
  through their ``from_settings`` classmethod.

Settings File
-------------
JSON is tried first, then YAML. Structure example::

    api_provider: anthropic
    anthropic_api_settings:
      key: sk-ant-...
      model: claude-3-5-sonnet-latest
    azure_oai_api_settings:
      key: ...
      url: https://res.openai.azure.com/openai/deployments/gpt4/chat/completions?api-version=2024-02-01
    model_options:
      temperature: 0.2
      max_tokens: 512

Placeholder API keys (see :func:`is_placeholder`) are treated as unset.

Public API
----------
* ``ApiSettings``, ``Settings``
* ``load_settings(path=None, overrides=None) -> Settings``
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..base.errors import ConfigurationError
from ..base.models import ModelOptions
from .defaults import (
    ANTHROPIC_DEFAULT_MODEL,
    ANTHROPIC_DEFAULT_URL,
    API_PROVIDER_ENV,
    AZURE_OPENAI_DEFAULT_MODEL,
    AZURE_OPENAI_DEFAULT_URL,
    DEFAULT_API_PROVIDER,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    OPENAI_DEFAULT_MODEL,
    OPENAI_DEFAULT_URL,
    SETTINGS_FILE_ENV,
)
from .env import SETTINGS_SECTION, env_api_settings, is_placeholder


class ApiSettings(BaseModel):
    """Key, endpoint URL and model for one provider."""

    model_config = ConfigDict(extra="ignore")

    key: str = ""
    url: str = ""
    model: str = ""


class Settings(BaseModel):
    """Application settings read by the factory and provider clients.

    ``api_provider`` is a plain string so that an unsupported selector
    reaches :class:`ProviderFactory` and fails there instead of being
    coerced here.
    """

    model_config = ConfigDict(extra="ignore")

    api_provider: str = DEFAULT_API_PROVIDER
    anthropic_api_settings: ApiSettings = Field(
        default_factory=lambda: ApiSettings(url=ANTHROPIC_DEFAULT_URL, model=ANTHROPIC_DEFAULT_MODEL)
    )
    azure_oai_api_settings: ApiSettings = Field(
        default_factory=lambda: ApiSettings(url=AZURE_OPENAI_DEFAULT_URL, model=AZURE_OPENAI_DEFAULT_MODEL)
    )
    openai_api_settings: ApiSettings = Field(
        default_factory=lambda: ApiSettings(url=OPENAI_DEFAULT_URL, model=OPENAI_DEFAULT_MODEL)
    )
    model_options: ModelOptions = Field(
        default_factory=lambda: ModelOptions(
            temperature=DEFAULT_TEMPERATURE, max_tokens=DEFAULT_MAX_TOKENS
        )
    )


def _deep_merge(base: Dict[str, Any], extra: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``base`` updated recursively with ``extra`` (extra wins)."""
    out = dict(base)
    for k, v in extra.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), Mapping):
            out[k] = _deep_merge(dict(out[k]), v)
        else:
            out[k] = v
    return out


def _load_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Parse a JSON or YAML settings file into a mapping."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            message=f"Cannot read settings file {p}: {exc.strerror or exc}",
            field_name="settings_file",
            raw=exc,
        ) from exc
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                message=f"Settings file {p} is neither valid JSON nor YAML",
                field_name="settings_file",
                raw=exc,
            ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            message=f"Settings file {p} must contain a mapping at the top level",
            field_name="settings_file",
        )
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for provider, section in SETTINGS_SECTION.items():
        values = env_api_settings(provider)
        if values:
            out[section] = values
    selector = os.getenv(API_PROVIDER_ENV)
    if selector:
        out["api_provider"] = selector
    return out


def _drop_placeholder_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    for section in SETTINGS_SECTION.values():
        api = data.get(section)
        if isinstance(api, dict) and is_placeholder(api.get("key")):
            data[section] = {**api, "key": ""}
    return data


def load_settings(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Settings:
    """Return merged :class:`Settings`.

    Merge order (later wins): defaults -> settings file -> env vars -> overrides.

    Parameters
    ----------
    path:
        Settings file; falls back to ``RELAY_SETTINGS_FILE`` when omitted.
    overrides:
        Nested mapping shaped like :class:`Settings`, merged last.

    Raises
    ------
    ConfigurationError
        If the settings file cannot be read or parsed, or the merged values
        fail validation.
    """
    data: Dict[str, Any] = Settings().model_dump()

    file_path = path or os.getenv(SETTINGS_FILE_ENV)
    if file_path:
        data = _deep_merge(data, _load_file(file_path))

    data = _deep_merge(data, _env_overrides())
    if overrides:
        data = _deep_merge(data, overrides)

    try:
        return Settings.model_validate(_drop_placeholder_keys(data))
    except ValidationError as exc:
        raise ConfigurationError(
            message=f"Invalid settings: {exc.errors()[0].get('msg', exc)}",
            field_name="settings",
            raw=exc,
        ) from exc


__all__ = ["ApiSettings", "Settings", "load_settings", "is_placeholder"]
