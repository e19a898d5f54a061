"""Pydantic models for httpauth configuration.

The header value types live in :mod:`httpauth.auth`; this module only holds
the user-facing settings persisted by :mod:`httpauth.config`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

OUTPUT_FORMATS = ("auto", "json", "plain", "rich")


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )

    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        if value not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{value}'; expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        return value


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/httpauth/config.json``.

    Loaded and saved by :func:`~httpauth.config.load_global_config` and
    :func:`~httpauth.config.save_global_config`. See
    :func:`~httpauth.config.resolve_config` for how environment variables
    and CLI flags override these values.
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    default_realm: str = Field(
        default="Restricted", description="Realm used by `httpauth challenge`"
    )
