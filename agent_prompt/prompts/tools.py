"""Canonical tool catalog and tool-line formatting for the Tooling section."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable

from langchain_core.tools import BaseTool


@dataclass(frozen=True)
class ToolDescriptor:
    """A known tool id with its one-line summary."""

    id: str
    summary: str = ""

    def format_line(self) -> str:
        return f"- {self.id}: {self.summary}" if self.summary else f"- {self.id}"


# Declaration order is the display order.
TOOL_CATALOG: tuple[ToolDescriptor, ...] = (
    ToolDescriptor("read", "Read file contents"),
    ToolDescriptor("write", "Create or overwrite files"),
    ToolDescriptor("edit", "Make precise edits to files"),
    ToolDescriptor("grep", "Search file contents for patterns"),
    ToolDescriptor("find", "Find files by glob pattern"),
    ToolDescriptor("ls", "List directory contents"),
    ToolDescriptor("bash", "Run shell commands"),
    ToolDescriptor("process", "Manage background bash sessions"),
    ToolDescriptor("whatsapp_login", "Generate and wait for WhatsApp QR login"),
    ToolDescriptor("browser", "Control web browser"),
    ToolDescriptor("canvas", "Present/eval/snapshot the Canvas"),
    ToolDescriptor("nodes", "List/describe/notify/camera/screen on paired nodes"),
    ToolDescriptor("cron", "Manage cron jobs and wake events"),
    ToolDescriptor(
        "gateway",
        "Restart, apply config, or run updates on the running Clawdbot process",
    ),
    ToolDescriptor("agents_list", "List agent ids allowed for sessions_spawn"),
    ToolDescriptor(
        "sessions_list", "List other sessions (incl. sub-agents) with filters/last"
    ),
    ToolDescriptor("sessions_history", "Fetch history for another session/sub-agent"),
    ToolDescriptor("sessions_send", "Send a message to another session/sub-agent"),
    ToolDescriptor("sessions_spawn", "Spawn a sub-agent session"),
    ToolDescriptor("image", "Analyze an image with the configured image model"),
    ToolDescriptor("discord", "Send Discord reactions/messages and manage threads"),
    ToolDescriptor("slack", "Send Slack messages and manage channels"),
    ToolDescriptor("telegram", "Send Telegram reactions"),
    ToolDescriptor("whatsapp", "Send WhatsApp reactions"),
)

TOOL_ORDER: tuple[str, ...] = tuple(tool.id for tool in TOOL_CATALOG)
TOOL_SUMMARIES = MappingProxyType({tool.id: tool.summary for tool in TOOL_CATALOG})

# Enabling this tool also turns on the self-update section.
SELF_UPDATE_TOOL = "gateway"

FALLBACK_TOOL_LINES: tuple[str, ...] = (
    "Pi lists the standard tools above. This runtime enables:",
    "- grep: search file contents for patterns",
    "- find: find files by glob pattern",
    "- ls: list directory contents",
    "- bash: run shell commands (supports background via yieldMs/background)",
    "- process: manage background bash sessions",
    "- whatsapp_login: generate a WhatsApp QR code and wait for linking",
    "- browser: control clawd's dedicated browser",
    "- canvas: present/eval/snapshot the Canvas",
    "- nodes: list/describe/notify/camera/screen on paired nodes",
    "- cron: manage cron jobs and wake events",
    "- sessions_list: list sessions",
    "- sessions_history: fetch session history",
    "- sessions_send: send to another session",
)


def tool_names_from(tools: Iterable[BaseTool | str]) -> list[str]:
    """Return the names of tool objects (plain strings pass through)."""
    return [tool if isinstance(tool, str) else tool.name for tool in tools]


def normalize_tool_names(tool_names: Iterable[str]) -> frozenset[str]:
    """Trim and lowercase tool names, dropping blanks and duplicates."""
    return frozenset(
        normalized for normalized in (name.strip().lower() for name in tool_names)
        if normalized
    )


def format_tool_lines(tool_names: Iterable[str]) -> list[str]:
    """Format enabled tools as ``- id: summary`` lines.

    Catalog tools come first in catalog order. Unknown tools follow as bare
    ``- id`` lines, sorted.
    """
    available = normalize_tool_names(tool_names)
    lines = [tool.format_line() for tool in TOOL_CATALOG if tool.id in available]
    lines.extend(f"- {name}" for name in sorted(available - set(TOOL_ORDER)))
    return lines


def has_self_update_tool(tool_names: Iterable[str]) -> bool:
    return SELF_UPDATE_TOOL in normalize_tool_names(tool_names)
