"""Scaffold plan - the ordered, labelled steps that build a project.

The plan is plain data: building it has no side effects, so it can be listed,
inspected and run one step at a time.
"""

from __future__ import annotations

from typing import List

from basinas.domain.config import AppConfig
from basinas.domain.models.command import CommandInvocation
from basinas.domain.models.step import (
    CommandStep,
    PatchFileStep,
    RelocateStep,
    Step,
    WriteFileStep,
)
from basinas.domain.patches import (
    GLOBALS_CSS_RULES,
    GROUPED_LAYOUT_RULES,
    HEADER_RULES,
    MOBILE_MENU_RULES,
    PACKAGE_JSON_RULES,
    ROOT_LAYOUT_RULES,
)
from basinas.domain.templates import components, docs, pages, site

ROUTE_GROUP = "(main)"
MAIN_ROUTE_FILES = ("layout.tsx", "page.tsx", "error.tsx", "loading.tsx", "not-found.tsx")
MAIN_ROUTE_DIRS = ("about", "contact", "get-started", "privacy", "terms")

DOCS_PACKAGES = (
    "fumadocs-ui",
    "fumadocs-core",
    "fumadocs-mdx",
    "fumadocs-typescript",
    "shiki",
)


def _generator_steps(project_name: str, config: AppConfig) -> List[Step]:
    tools = config.tools
    return [
        CommandStep(
            "Setting up Next.js 16 project",
            CommandInvocation(
                tools.npx,
                (
                    tools.next_app_package,
                    project_name,
                    "--yes",
                    "--typescript",
                    "--tailwind",
                    "--eslint",
                    "--biome",
                    "--app",
                    "--turbopack",
                    "--import-alias",
                    "@/*",
                ),
            ),
            in_project=False,
        ),
        CommandStep(
            "Installing shadcn/ui",
            CommandInvocation(
                tools.npx,
                (tools.shadcn_package, "init", "--yes", "--css-variables", "--base-color", tools.base_color),
            ),
        ),
        CommandStep(
            "Installing shadcn/ui components",
            CommandInvocation(tools.npx, (tools.shadcn_package, "add", "--all", "--yes")),
        ),
        CommandStep(
            "Installing dark mode support",
            CommandInvocation(tools.npm, ("install", "next-themes")),
        ),
        CommandStep(
            "Installing optimized third-party libraries",
            CommandInvocation(tools.npm, ("install", "@next/third-parties@latest", "sharp")),
        ),
    ]


def _site_steps(project_name: str, config: AppConfig) -> List[Step]:
    return [
        WriteFileStep("Setting up theme provider", "components/theme-provider.tsx", components.THEME_PROVIDER),
        PatchFileStep(
            "Updating root layout",
            ("app/layout.tsx", f"app/{ROUTE_GROUP}/layout.tsx"),
            ROOT_LAYOUT_RULES,
        ),
        WriteFileStep("Creating mode toggle component", "components/mode-toggle.tsx", components.MODE_TOGGLE),
        WriteFileStep("Creating mobile menu component", "components/mobile-menu.tsx", components.MOBILE_MENU),
        WriteFileStep("Creating header component", "components/header.tsx", components.HEADER),
        WriteFileStep("Creating footer component", "components/footer.tsx", components.FOOTER),
        WriteFileStep(
            "Creating hover prefetch link component",
            "components/hover-prefetch-link.tsx",
            components.HOVER_PREFETCH_LINK,
        ),
        WriteFileStep(
            "Setting up environment variables",
            ".env",
            site.render_env_file(project_name, config.site),
        ),
        WriteFileStep("Creating about page", "app/about/page.tsx", pages.ABOUT_PAGE),
        WriteFileStep("Creating contact page", "app/contact/page.tsx", pages.CONTACT_PAGE),
        WriteFileStep("Creating privacy page", "app/privacy/page.tsx", pages.PRIVACY_PAGE),
        WriteFileStep("Creating terms page", "app/terms/page.tsx", pages.TERMS_PAGE),
        WriteFileStep("Creating get started page", "app/get-started/page.tsx", pages.GET_STARTED_PAGE),
        WriteFileStep("Creating not found page", "app/not-found.tsx", pages.NOT_FOUND_PAGE),
        WriteFileStep("Creating error page", "app/error.tsx", pages.ERROR_PAGE),
        WriteFileStep("Creating loading page", "app/loading.tsx", pages.LOADING_PAGE),
        WriteFileStep("Creating sitemap", "app/sitemap.ts", site.SITEMAP),
        WriteFileStep("Creating robots", "app/robots.ts", site.ROBOTS),
        WriteFileStep("Creating optimized Next.js config", "next.config.ts", site.NEXT_CONFIG),
        WriteFileStep("Creating instrumentation", "app/instrumentation.ts", site.INSTRUMENTATION),
        WriteFileStep("Creating suspense wrapper", "components/suspense-wrapper.tsx", components.SUSPENSE_WRAPPER),
        WriteFileStep("Creating streaming layout", "components/streaming-layout.tsx", components.STREAMING_LAYOUT),
        WriteFileStep("Creating optimized fonts", "lib/fonts.ts", site.FONTS),
        WriteFileStep("Updating main page", "app/page.tsx", pages.MAIN_PAGE),
        WriteFileStep("Setting up proxy middleware", "proxy.ts", site.PROXY),
    ]


def _docs_steps(config: AppConfig) -> List[Step]:
    tools = config.tools
    steps: List[Step] = [
        CommandStep(
            "Installing Fumadocs",
            CommandInvocation(tools.npm, ("install", *DOCS_PACKAGES)),
        ),
        WriteFileStep("Creating Fumadocs source config", "source.config.ts", docs.SOURCE_CONFIG),
        WriteFileStep("Creating docs source loader", "lib/source.ts", docs.DOCS_SOURCE),
        WriteFileStep("Creating isolated docs layout", "app/docs/layout.tsx", docs.DOCS_LAYOUT),
        WriteFileStep("Creating docs page", "app/docs/[[...slug]]/page.tsx", docs.DOCS_PAGE),
    ]
    steps.extend(
        WriteFileStep(f"Creating docs content: {slug}", f"content/docs/{slug}.mdx", content)
        for slug, content in docs.DOCS_PAGES.items()
    )
    steps.extend(
        [
            WriteFileStep("Creating docs sidebar meta", "content/docs/meta.json", docs.DOCS_META),
            PatchFileStep("Adding docs link to header", ("components/header.tsx",), HEADER_RULES),
            PatchFileStep("Adding docs link to mobile menu", ("components/mobile-menu.tsx",), MOBILE_MENU_RULES),
            WriteFileStep("Creating MDX components", "mdx-components.tsx", components.MDX_COMPONENTS),
            PatchFileStep("Updating package.json scripts", ("package.json",), PACKAGE_JSON_RULES),
            PatchFileStep("Adding Fumadocs styles", ("app/globals.css",), GLOBALS_CSS_RULES),
            CommandStep(
                "Generating documentation source files",
                CommandInvocation(tools.npx, ("fumadocs-mdx",)),
            ),
        ]
    )
    return steps


def _route_group_steps(config: AppConfig) -> List[Step]:
    steps: List[Step] = [
        RelocateStep(
            "Organizing route groups for isolated layouts",
            parent="app",
            group=ROUTE_GROUP,
            names=MAIN_ROUTE_FILES + MAIN_ROUTE_DIRS,
        ),
        PatchFileStep(
            "Fixing stylesheet import in grouped layout",
            (f"app/{ROUTE_GROUP}/layout.tsx",),
            GROUPED_LAYOUT_RULES,
        ),
    ]
    return steps


def build_plan(project_name: str, config: AppConfig) -> List[Step]:
    """Build the full, ordered scaffold plan

    Args:
        project_name: Name of the project directory to create
        config: Application configuration

    Returns:
        Ordered list of steps; labels are unique
    """
    plan = _generator_steps(project_name, config) + _site_steps(project_name, config)
    if config.tools.install_docs:
        plan += _docs_steps(config)
        plan += _route_group_steps(config)
    return plan


def find_step(plan: List[Step], label: str) -> Step:
    """Look up a step by label (case-insensitive)

    Raises:
        ValueError: If no step has that label
    """
    wanted = label.strip().lower()
    for step in plan:
        if step.label.lower() == wanted:
            return step
    raise ValueError(f"Unknown step: {label}")
