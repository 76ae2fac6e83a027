"""Node executable lookup for launching the agent runtime.

Distinguishes user-level version-manager installs (nvm, fnm, volta, ...)
from the canonical system install locations of each platform.
"""

from __future__ import annotations

import asyncio
import logging
import ntpath
import os
import posixpath
import sys
from collections.abc import Mapping

logger = logging.getLogger("agent-prompt")

VERSION_MANAGER_MARKERS = (
    "/.nvm/",
    "/.fnm/",
    "/.volta/",
    "/.asdf/",
    "/.n/",
    "/.nodenv/",
    "/.nodebrew/",
    "/nvs/",
)

Env = Mapping[str, str]


def normalize_for_compare(path: str, platform: str) -> str:
    """Normalize *path* for comparison on *platform*.

    Windows paths are compared case-insensitively with forward slashes.
    """
    path_module = ntpath if platform == "win32" else posixpath
    separators = "\\/" if platform == "win32" else "/"
    normalized = path_module.normpath(path).replace("\\", "/")
    # normpath drops a trailing separator; markers like "/nvs/" rely on it.
    if path.endswith(tuple(separators)) and not normalized.endswith("/"):
        normalized += "/"
    if platform == "win32":
        return normalized.lower()
    return normalized


def system_node_candidates(env: Env, platform: str) -> list[str]:
    if platform == "darwin":
        return ["/opt/homebrew/bin/node", "/usr/local/bin/node", "/usr/bin/node"]
    if platform == "linux":
        return ["/usr/local/bin/node", "/usr/bin/node"]
    if platform == "win32":
        program_files = env.get("ProgramFiles", "C:\\Program Files")
        program_files_x86 = env.get("ProgramFiles(x86)", "C:\\Program Files (x86)")
        return [
            ntpath.join(program_files, "nodejs", "node.exe"),
            ntpath.join(program_files_x86, "nodejs", "node.exe"),
        ]
    return []


def is_version_managed_node_path(node_path: str, platform: str = sys.platform) -> bool:
    normalized = normalize_for_compare(node_path, platform)
    return any(marker in normalized for marker in VERSION_MANAGER_MARKERS)


def is_system_node_path(
    node_path: str,
    env: Env | None = None,
    platform: str = sys.platform,
) -> bool:
    normalized = normalize_for_compare(node_path, platform)
    return any(
        normalized == normalize_for_compare(candidate, platform)
        for candidate in system_node_candidates(os.environ if env is None else env, platform)
    )


async def resolve_system_node_path(
    env: Env | None = None,
    platform: str = sys.platform,
) -> str | None:
    """Return the first system node candidate that exists, or None."""
    candidates = system_node_candidates(os.environ if env is None else env, platform)
    for candidate in candidates:
        if await asyncio.to_thread(os.access, candidate, os.F_OK):
            logger.debug("Resolved system node: %s", candidate)
            return candidate
    logger.debug("No system node found among %d candidates", len(candidates))
    return None


async def resolve_preferred_node_path(
    env: Env | None = None,
    runtime: str | None = None,
) -> str | None:
    """Prefer the system node install when the runtime is ``node``."""
    if runtime != "node":
        return None
    return await resolve_system_node_path(env)
