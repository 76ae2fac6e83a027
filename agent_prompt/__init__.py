"""System prompt assembly for the Clawdbot agent runtime."""

from .config import AssemblyConfig, ContextFile, RuntimeInfo, SandboxInfo
from .prompts.assembler import assemble_system_prompt, build_system_message
