"""
Tests de rdlauncher.core.launch.context — LaunchContext y rutas portables.
"""

import dataclasses

import pytest

from rdlauncher.core.errors import NoSelectionError
from rdlauncher.core.launch.context import LaunchContext, to_portable_path
from rdlauncher.core.launch.tokens import TokenClass


class TestToPortablePath:
    def test_windows_drive_path(self):
        assert to_portable_path("C:\\Users\\me\\proj") == "/C/Users/me/proj"

    def test_lowercase_drive(self):
        assert to_portable_path("d:\\work\\app") == "/d/work/app"

    def test_drive_root(self):
        assert to_portable_path("C:\\") == "/C"

    def test_mixed_separators(self):
        assert to_portable_path("C:/work\\app") == "/C/work/app"

    def test_posix_path_unchanged(self):
        assert to_portable_path("/home/me/proj") == "/home/me/proj"

    def test_relative_gets_leading_slash(self):
        assert to_portable_path("work\\app") == "/work/app"

    def test_accepts_pathlike(self, tmp_path):
        assert to_portable_path(tmp_path) == str(tmp_path)


class TestLaunchContext:
    def test_from_selection(self):
        ctx = LaunchContext.from_selection("C:\\work", "C:\\work\\app", "App1")
        assert ctx.workspace_root == "C:\\work"
        assert ctx.project_root == "C:\\work\\app"
        assert ctx.workspace_root_portable == "/C/work"
        assert ctx.project_root_portable == "/C/work/app"
        assert ctx.project_name == "App1"

    def test_default_name_is_project_dir(self):
        ctx = LaunchContext.from_selection("C:\\work", "C:\\work\\app\\")
        assert ctx.project_name == "app"

    def test_default_name_posix(self, tmp_path):
        project = tmp_path / "MyApp"
        ctx = LaunchContext.from_selection(tmp_path, project)
        assert ctx.project_name == "MyApp"
        assert ctx.project_root == str(project)

    def test_empty_name_is_kept(self):
        ctx = LaunchContext.from_selection("/ws", "/ws/app", "")
        assert ctx.project_name == ""

    def test_missing_workspace_uses_project(self):
        ctx = LaunchContext.from_selection(None, "/ws/app", "x")
        assert ctx.workspace_root == "/ws/app"

    @pytest.mark.parametrize("project", [None, "", "   "])
    def test_no_selection(self, project):
        with pytest.raises(NoSelectionError) as exc:
            LaunchContext.from_selection("/ws", project, "x")
        assert str(exc.value) == "There are no selected projects to debug"

    def test_is_immutable(self):
        ctx = LaunchContext.from_selection("/ws", "/ws/app", "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.project_name = "y"

    def test_values_cover_every_token_class(self):
        ctx = LaunchContext.from_selection("C:\\ws", "C:\\ws\\app", "App")
        values = ctx.values()
        assert set(values) == set(TokenClass)
        assert values[TokenClass.PROJECT_ROOT_PORTABLE] == "/C/ws/app"
        assert values[TokenClass.WORKSPACE_ROOT] == "C:\\ws"
