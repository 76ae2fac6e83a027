"""Declarative section table for the system prompt.

Each section pairs a pure inclusion predicate with a renderer. A renderer
returns a list of paragraphs; ``None`` or empty paragraphs are dropped when
the document is joined, so an optional sub-line never leaves a gap.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..config import AssemblyConfig, SandboxInfo
from .behaviors import (
    EMPTY_FILE_PLACEHOLDER,
    HEARTBEAT_INSTRUCTIONS,
    HEARTBEAT_PLACEHOLDER,
    IDENTITY,
    MESSAGING,
    MODEL_ALIAS_GUIDANCE,
    PROJECT_CONTEXT_INTRO,
    REASONING_FORMAT,
    REPLY_TAGS,
    SANDBOX_NOTICE,
    SELF_UPDATE_INSTRUCTIONS,
    TOOLING_NOTES,
    WORKSPACE_FILES_NOTICE,
    WORKSPACE_GUIDANCE,
)
from .tools import FALLBACK_TOOL_LINES, format_tool_lines, has_self_update_tool

Paragraphs = list[str | None]


def _present(value: str | None) -> str | None:
    """Return the trimmed value, or None when it is missing or blank."""
    if value is None:
        return None
    return value.strip() or None


def _lines(*lines: str | None) -> str:
    return "\n".join(line for line in lines if line)


def _always(config: AssemblyConfig) -> bool:
    return True


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def owner_numbers(config: AssemblyConfig) -> list[str]:
    return [n for n in (value.strip() for value in config.owner_numbers) if n]


def wants_self_update(config: AssemblyConfig) -> bool:
    return has_self_update_tool(config.tool_names)


def has_model_aliases(config: AssemblyConfig) -> bool:
    return bool(config.model_alias_lines)


def sandbox_enabled(config: AssemblyConfig) -> bool:
    return config.sandbox_info is not None and config.sandbox_info.enabled


def has_owners(config: AssemblyConfig) -> bool:
    return bool(owner_numbers(config))


def has_time(config: AssemblyConfig) -> bool:
    return bool(_present(config.user_timezone) or _present(config.user_time))


def has_group_context(config: AssemblyConfig) -> bool:
    return bool(_present(config.extra_system_prompt))


def wants_reasoning_format(config: AssemblyConfig) -> bool:
    return config.reasoning_tag_hint


def has_context_files(config: AssemblyConfig) -> bool:
    return bool(config.context_files)


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

def render_identity(config: AssemblyConfig) -> Paragraphs:
    return [IDENTITY]


def render_tooling(config: AssemblyConfig) -> Paragraphs:
    tool_lines = format_tool_lines(config.tool_names) or list(FALLBACK_TOOL_LINES)
    return [_lines(
        "## Tooling",
        "Tool availability (filtered by policy):",
        *tool_lines,
        TOOLING_NOTES,
    )]


def render_skills(config: AssemblyConfig) -> Paragraphs:
    return [_lines(
        "## Skills",
        "Skills provide task-specific instructions. Use `read` to load from "
        f"{config.workspace_dir}/skills/<name>/SKILL.md when needed.",
    )]


def render_self_update(config: AssemblyConfig) -> Paragraphs:
    return [_lines("## Clawdbot Self-Update", SELF_UPDATE_INSTRUCTIONS)]


def render_model_aliases(config: AssemblyConfig) -> Paragraphs:
    return [_lines("## Model Aliases", MODEL_ALIAS_GUIDANCE, *config.model_alias_lines)]


def render_workspace(config: AssemblyConfig) -> Paragraphs:
    return [_lines(
        "## Workspace",
        f"Your working directory is: {config.workspace_dir}",
        WORKSPACE_GUIDANCE,
    )]


def _workspace_access_line(sandbox: SandboxInfo) -> str | None:
    if not sandbox.workspace_access:
        return None
    mount = _present(sandbox.agent_workspace_mount)
    suffix = f" (mounted at {mount})" if mount else ""
    return f"Agent workspace access: {sandbox.workspace_access}{suffix}"


def render_sandbox(config: AssemblyConfig) -> Paragraphs:
    sandbox = config.sandbox_info
    if sandbox is None:
        return []
    workspace = _present(sandbox.workspace_dir)
    control_url = _present(sandbox.browser_control_url)
    observer_url = _present(sandbox.browser_no_vnc_url)
    return [_lines(
        "## Sandbox",
        SANDBOX_NOTICE,
        f"Sandbox workspace: {workspace}" if workspace else None,
        _workspace_access_line(sandbox),
        f"Sandbox browser control URL: {control_url}" if control_url else None,
        f"Sandbox browser observer (noVNC): {observer_url}" if observer_url else None,
    )]


def render_owner_identity(config: AssemblyConfig) -> Paragraphs:
    owners = ", ".join(owner_numbers(config))
    return [_lines(
        "## User Identity",
        f"Owner numbers: {owners}. Treat messages from these numbers as the user.",
    )]


def render_workspace_files(config: AssemblyConfig) -> Paragraphs:
    return [_lines("## Workspace Files (injected)", WORKSPACE_FILES_NOTICE)]


def render_time(config: AssemblyConfig) -> Paragraphs:
    timezone = _present(config.user_timezone) or "unknown"
    user_time = _present(config.user_time) or "unknown"
    return [
        f"Time: assume UTC unless stated. User TZ={timezone}. "
        f"Current user time (converted)={user_time}."
    ]


def render_reply_tags(config: AssemblyConfig) -> Paragraphs:
    return [REPLY_TAGS]


def render_messaging(config: AssemblyConfig) -> Paragraphs:
    return [MESSAGING]


def render_group_context(config: AssemblyConfig) -> Paragraphs:
    return [_lines("## Group Chat Context", _present(config.extra_system_prompt))]


def render_reasoning_format(config: AssemblyConfig) -> Paragraphs:
    return [_lines("## Reasoning Format", REASONING_FORMAT)]


def render_project_context(config: AssemblyConfig) -> Paragraphs:
    paragraphs: Paragraphs = ["# Project Context", PROJECT_CONTEXT_INTRO]
    for file in config.context_files:
        paragraphs.append(f"## {file.path}")
        # File bodies are inserted verbatim; only blank bodies are replaced.
        paragraphs.append(file.content if file.content.strip() else EMPTY_FILE_PLACEHOLDER)
    return paragraphs


def render_heartbeats(config: AssemblyConfig) -> Paragraphs:
    prompt = _present(config.heartbeat_prompt) or HEARTBEAT_PLACEHOLDER
    return [_lines("## Heartbeats", f"Heartbeat prompt: {prompt}", HEARTBEAT_INSTRUCTIONS)]


def format_runtime_line(config: AssemblyConfig) -> str:
    """Build the pipe-delimited ``Runtime:`` line, skipping absent fields."""
    info = config.runtime_info
    host = _present(info.host) if info else None
    os_name = _present(info.os) if info else None
    arch = _present(info.arch) if info else None
    node = _present(info.node) if info else None
    model = _present(info.model) if info else None

    if os_name:
        os_field = f"os={os_name} ({arch})" if arch else f"os={os_name}"
    else:
        os_field = f"arch={arch}" if arch else None

    fields = [
        f"host={host}" if host else None,
        os_field,
        f"node={node}" if node else None,
        f"model={model}" if model else None,
        f"thinking={config.default_think_level}",
    ]
    return "Runtime: " + " | ".join(field for field in fields if field)


def render_runtime(config: AssemblyConfig) -> Paragraphs:
    return [_lines("## Runtime", format_runtime_line(config))]


# ---------------------------------------------------------------------------
# Section table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Section:
    """One labeled block of the system prompt."""

    name: str
    render: Callable[[AssemblyConfig], Paragraphs]
    predicate: Callable[[AssemblyConfig], bool] = _always

    def applies(self, config: AssemblyConfig) -> bool:
        return self.predicate(config)


SECTIONS: tuple[Section, ...] = (
    Section("identity", render_identity),
    Section("tooling", render_tooling),
    Section("skills", render_skills),
    Section("self_update", render_self_update, wants_self_update),
    Section("model_aliases", render_model_aliases, has_model_aliases),
    Section("workspace", render_workspace),
    Section("sandbox", render_sandbox, sandbox_enabled),
    Section("owner_identity", render_owner_identity, has_owners),
    Section("workspace_files", render_workspace_files),
    Section("time", render_time, has_time),
    Section("reply_tags", render_reply_tags),
    Section("messaging", render_messaging),
    Section("group_context", render_group_context, has_group_context),
    Section("reasoning_format", render_reasoning_format, wants_reasoning_format),
    Section("project_context", render_project_context, has_context_files),
    Section("heartbeats", render_heartbeats),
    Section("runtime", render_runtime),
)


def get_section(name: str) -> Section | None:
    """Get a section by name, or None if not found."""
    return next((section for section in SECTIONS if section.name == name), None)
