from __future__ import annotations

import pytest

from agent_prompt import runtime_paths
from agent_prompt.runtime_paths import (
    is_system_node_path,
    is_version_managed_node_path,
    normalize_for_compare,
    resolve_preferred_node_path,
    resolve_system_node_path,
    system_node_candidates,
)


class TestNormalizeForCompare:
    def test_posix_collapses_segments(self):
        assert normalize_for_compare("/usr//local/./bin/../bin/node", "linux") == "/usr/local/bin/node"

    def test_posix_is_case_sensitive(self):
        assert normalize_for_compare("/USR/bin/node", "darwin") == "/USR/bin/node"

    def test_windows_lowercases_and_uses_forward_slashes(self):
        assert (
            normalize_for_compare("C:\\Program Files\\NodeJS\\node.exe", "win32")
            == "c:/program files/nodejs/node.exe"
        )

    def test_trailing_separator_kept(self):
        assert normalize_for_compare("/opt/nvs/", "linux") == "/opt/nvs/"
        assert normalize_for_compare("/opt/nvs", "linux") == "/opt/nvs"
        assert normalize_for_compare("C:\\Tools\\NVS\\", "win32") == "c:/tools/nvs/"


class TestVersionManagedPath:
    @pytest.mark.parametrize(
        "path",
        [
            "/home/me/.nvm/versions/node/v22.1.0/bin/node",
            "/Users/me/.volta/tools/image/node/22/bin/node",
            "/home/me/.asdf/installs/nodejs/22/bin/node",
            "/home/me/.local/share/fnm/../../../.fnm/node-versions/v22/bin/node",
        ],
    )
    def test_posix_markers(self, path):
        assert is_version_managed_node_path(path, "linux") is True

    def test_system_path_is_not_version_managed(self):
        assert is_version_managed_node_path("/usr/local/bin/node", "linux") is False

    def test_posix_marker_match_is_case_sensitive(self):
        assert is_version_managed_node_path("/home/me/.NVM/bin/node", "linux") is False

    def test_windows_backslashes_and_case(self):
        assert is_version_managed_node_path("C:\\Users\\Me\\AppData\\Local\\NVS\\node\\node.exe", "win32")

    def test_marker_at_end_of_directory_path(self):
        assert is_version_managed_node_path("/opt/nvs/", "linux") is True
        assert is_version_managed_node_path("/home/me/.nvm//", "linux") is True


class TestSystemNodePath:
    def test_candidates_per_platform(self):
        assert system_node_candidates({}, "darwin")[0] == "/opt/homebrew/bin/node"
        assert system_node_candidates({}, "linux") == ["/usr/local/bin/node", "/usr/bin/node"]
        assert system_node_candidates({}, "freebsd") == []

    def test_windows_candidates_use_env(self):
        candidates = system_node_candidates({"ProgramFiles": "D:\\Apps"}, "win32")
        assert candidates == [
            "D:\\Apps\\nodejs\\node.exe",
            "C:\\Program Files (x86)\\nodejs\\node.exe",
        ]

    def test_windows_empty_program_files_is_kept(self):
        candidates = system_node_candidates({"ProgramFiles": ""}, "win32")
        assert candidates[0] == "nodejs\\node.exe"

    def test_linux_match(self):
        assert is_system_node_path("/usr/bin/node", {}, "linux") is True
        assert is_system_node_path("/usr/bin/../bin/node", {}, "linux") is True
        assert is_system_node_path("/opt/homebrew/bin/node", {}, "linux") is False

    def test_windows_match_is_case_insensitive(self):
        assert is_system_node_path("c:/program files/nodejs/NODE.EXE", {}, "win32") is True


class TestResolveSystemNodePath:
    @pytest.mark.asyncio
    async def test_returns_first_existing(self, tmp_path, monkeypatch):
        missing = tmp_path / "missing" / "node"
        first = tmp_path / "a" / "node"
        second = tmp_path / "b" / "node"
        for path in (first, second):
            path.parent.mkdir()
            path.write_text("")
        monkeypatch.setattr(
            runtime_paths,
            "system_node_candidates",
            lambda env, platform: [str(missing), str(first), str(second)],
        )
        assert await resolve_system_node_path({}, "linux") == str(first)

    @pytest.mark.asyncio
    async def test_returns_none_when_nothing_exists(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            runtime_paths,
            "system_node_candidates",
            lambda env, platform: [str(tmp_path / "nope")],
        )
        assert await resolve_system_node_path({}, "linux") is None

    @pytest.mark.asyncio
    async def test_unknown_platform_has_no_candidates(self):
        assert await resolve_system_node_path({}, "plan9") is None


class TestResolvePreferredNodePath:
    @pytest.mark.asyncio
    async def test_non_node_runtime(self):
        assert await resolve_preferred_node_path(env={}, runtime="bun") is None
        assert await resolve_preferred_node_path(env={}) is None

    @pytest.mark.asyncio
    async def test_node_runtime_uses_system_node(self, monkeypatch):
        async def _fake(env=None, platform=None):
            return "/usr/bin/node"

        monkeypatch.setattr(runtime_paths, "resolve_system_node_path", _fake)
        assert await resolve_preferred_node_path(env={}, runtime="node") == "/usr/bin/node"
