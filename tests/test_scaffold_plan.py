"""Tests for the scaffold plan"""

from __future__ import annotations

import pytest

from basinas.application.scaffold_plan import (
    DOCS_PACKAGES,
    MAIN_ROUTE_DIRS,
    MAIN_ROUTE_FILES,
    build_plan,
    find_step,
)
from basinas.domain.config import AppConfig, ToolsConfig
from basinas.domain.models.step import CommandStep, PatchFileStep, RelocateStep, WriteFileStep


@pytest.fixture
def plan():
    return build_plan("my-app", AppConfig())


def _labels(plan):
    return [step.label for step in plan]


class TestBuildPlan:
    """Tests for build_plan"""

    def test_labels_are_unique(self, plan):
        """Test that every label identifies exactly one step"""
        labels = _labels(plan)
        assert len(labels) == len(set(labels))

    def test_generator_runs_first_in_parent_dir(self, plan):
        """Test that create-next-app runs before anything else, outside the project"""
        first = plan[0]
        assert isinstance(first, CommandStep)
        assert first.in_project is False
        assert first.invocation.command == "npx"
        assert first.invocation.args[:2] == ("create-next-app@latest", "my-app")
        assert "--typescript" in first.invocation.args
        assert "--app" in first.invocation.args

    def test_step_order(self, plan):
        """Test the relative order of the major phases"""
        labels = _labels(plan)
        order = [
            "Setting up Next.js 16 project",
            "Installing shadcn/ui",
            "Installing shadcn/ui components",
            "Installing dark mode support",
            "Setting up theme provider",
            "Updating root layout",
            "Creating header component",
            "Setting up environment variables",
            "Updating main page",
            "Installing Fumadocs",
            "Adding docs link to header",
            "Updating package.json scripts",
            "Generating documentation source files",
            "Organizing route groups for isolated layouts",
            "Fixing stylesheet import in grouped layout",
        ]
        positions = [labels.index(label) for label in order]
        assert positions == sorted(positions)

    def test_route_group_steps_come_last(self, plan):
        """Test that relocation happens after every file has been written"""
        relocate = plan[-2]
        assert isinstance(relocate, RelocateStep)
        assert relocate.parent == "app"
        assert relocate.group == "(main)"
        assert relocate.names == MAIN_ROUTE_FILES + MAIN_ROUTE_DIRS
        assert "docs" not in relocate.names

        fix = plan[-1]
        assert isinstance(fix, PatchFileStep)
        assert fix.paths == ("app/(main)/layout.tsx",)

    def test_layout_patch_has_grouped_fallback(self, plan):
        """Test that the root layout patch also finds the moved layout"""
        step = find_step(plan, "Updating root layout")
        assert step.paths == ("app/layout.tsx", "app/(main)/layout.tsx")

    def test_env_file_uses_project_name(self, plan):
        """Test that the .env file carries the project name"""
        step = find_step(plan, "Setting up environment variables")
        assert isinstance(step, WriteFileStep)
        assert step.path == ".env"
        assert "NEXT_PUBLIC_APP_NAME=my-app\n" in step.content
        assert 'NEXT_PUBLIC_APP_VERSION="1.0.0"' in step.content

    def test_docs_content_pages(self, plan):
        """Test that each docs page gets its own step"""
        paths = [step.path for step in plan if isinstance(step, WriteFileStep)]
        for slug in ("index", "quick-start", "api"):
            assert f"content/docs/{slug}.mdx" in paths
        assert "content/docs/meta.json" in paths

    def test_docs_install_packages(self, plan):
        """Test the Fumadocs install command"""
        step = find_step(plan, "Installing Fumadocs")
        assert step.invocation.args == ("install", *DOCS_PACKAGES)

    def test_without_docs(self):
        """Test that disabling docs drops the docs and route group steps"""
        config = AppConfig(tools=ToolsConfig(install_docs=False))

        plan = build_plan("my-app", config)

        labels = _labels(plan)
        assert "Installing Fumadocs" not in labels
        assert not any(isinstance(step, RelocateStep) for step in plan)
        assert labels[-1] == "Setting up proxy middleware"

    def test_configured_tools(self):
        """Test that configured executables and packages are used"""
        config = AppConfig(
            tools=ToolsConfig(npx="pnpx", npm="pnpm", base_color="zinc", shadcn_package="shadcn@2")
        )

        plan = build_plan("my-app", config)

        commands = [step.invocation for step in plan if isinstance(step, CommandStep)]
        assert {c.command for c in commands} == {"pnpx", "pnpm"}
        init = find_step(plan, "Installing shadcn/ui").invocation
        assert init.args[0] == "shadcn@2"
        assert init.args[-2:] == ("--base-color", "zinc")

    def test_building_has_no_side_effects(self, tmp_path, monkeypatch):
        """Test that building the plan touches nothing on disk"""
        monkeypatch.chdir(tmp_path)
        build_plan("my-app", AppConfig())
        assert list(tmp_path.iterdir()) == []


class TestFindStep:
    """Tests for find_step"""

    def test_case_insensitive(self, plan):
        """Test that label lookup ignores case and surrounding whitespace"""
        step = find_step(plan, "  creating HEADER component ")
        assert step.label == "Creating header component"

    def test_unknown_label(self, plan):
        """Test that an unknown label raises ValueError"""
        with pytest.raises(ValueError, match="Unknown step: Deploying"):
            find_step(plan, "Deploying")
