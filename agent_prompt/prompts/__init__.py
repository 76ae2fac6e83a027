"""System prompt composition for the Clawdbot agent."""

from .assembler import assemble_system_prompt, build_system_message
from .behaviors import HEARTBEAT_TOKEN, REASONING_FORMAT
from .sections import SECTIONS, Section, get_section
from .tools import TOOL_CATALOG, ToolDescriptor, format_tool_lines, tool_names_from
