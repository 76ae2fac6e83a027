"""Shared fixtures and helpers for prompt assembly tests."""

from __future__ import annotations

from agent_prompt.config import AssemblyConfig


def make_config(**overrides) -> AssemblyConfig:
    """Create an AssemblyConfig with sensible test defaults."""
    return AssemblyConfig(**{"workspace_dir": "/home/x", **overrides})


def headings(prompt: str) -> list[str]:
    return [line for line in prompt.split("\n") if line.startswith("#")]
