"""Runtime system prompt assembler."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from langchain_core.messages import SystemMessage

from ..config import AssemblyConfig
from .sections import SECTIONS, Section

logger = logging.getLogger("agent-prompt")


def _join_paragraphs(paragraphs: Iterable[str | None]) -> str:
    cleaned = (p.strip("\n") for p in paragraphs if p)
    return "\n\n".join(p for p in cleaned if p)


def render_section(section: Section, config: AssemblyConfig) -> str:
    """Render one section, or return "" when it does not apply."""
    if not section.applies(config):
        return ""
    return _join_paragraphs(section.render(config))


def assemble_system_prompt(config: AssemblyConfig) -> str:
    """Assemble the full system prompt from the section table.

    Sections are rendered in table order and joined by a single blank line.
    Sections whose predicate fails, or that render nothing, are left out.
    """
    included: list[str] = []
    blocks: list[str] = []
    for section in SECTIONS:
        block = render_section(section, config)
        if block:
            included.append(section.name)
            blocks.append(block)

    prompt = "\n\n".join(blocks)
    logger.debug(
        "Assembled system prompt (%d chars): %s",
        len(prompt),
        ", ".join(included),
    )
    return prompt


def build_system_message(config: AssemblyConfig) -> SystemMessage:
    """Wrap the assembled prompt as a chat-model system message."""
    return SystemMessage(content=assemble_system_prompt(config))
