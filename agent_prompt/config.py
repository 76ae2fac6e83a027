"""Typed inputs for one system prompt assembly."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_THINK_LEVEL = "off"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ContextFile(_ConfigModel):
    """A user-editable file injected into the Project Context section."""

    path: str
    content: str = ""


class RuntimeInfo(_ConfigModel):
    host: str | None = None
    os: str | None = None
    arch: str | None = None
    node: str | None = None
    model: str | None = None


class SandboxInfo(_ConfigModel):
    enabled: bool = False
    workspace_dir: str | None = None
    workspace_access: Literal["none", "ro", "rw"] | None = None
    agent_workspace_mount: str | None = None
    browser_control_url: str | None = None
    browser_no_vnc_url: str | None = None


class AssemblyConfig(_ConfigModel):
    """Everything the assembler knows about one session.

    Only ``workspace_dir`` is required. Every other field is optional and an
    absent value suppresses the section that would have shown it.
    """

    workspace_dir: str
    default_think_level: str = DEFAULT_THINK_LEVEL
    extra_system_prompt: str | None = None
    owner_numbers: list[str] = Field(default_factory=list)
    reasoning_tag_hint: bool = False
    tool_names: list[str] = Field(default_factory=list)
    model_alias_lines: list[str] = Field(default_factory=list)
    user_timezone: str | None = None
    user_time: str | None = None
    context_files: list[ContextFile] = Field(default_factory=list)
    heartbeat_prompt: str | None = None
    runtime_info: RuntimeInfo | None = None
    sandbox_info: SandboxInfo | None = None

    @field_validator("default_think_level", mode="before")
    @classmethod
    def _normalize_think_level(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_THINK_LEVEL
        if isinstance(value, str):
            return value.strip().lower() or DEFAULT_THINK_LEVEL
        return value

    @classmethod
    def from_init_data(cls, init_data: dict[str, Any]) -> AssemblyConfig:
        """Build a config from a backend init payload (camelCase or snake_case)."""
        return cls.model_validate(init_data)
