"""Tests for generated file templates"""

import json

from basinas.domain.config import SiteConfig
from basinas.domain.templates import docs, pages
from basinas.domain.templates.site import render_env_file


class TestEnvFile:
    """Tests for .env rendering"""

    def test_project_name_unquoted(self):
        """Test that the app name is written bare and other values quoted"""
        content = render_env_file("my-app", SiteConfig())

        lines = content.splitlines()
        assert lines[0] == "NEXT_PUBLIC_APP_NAME=my-app"
        assert 'NEXT_PUBLIC_APP_ADDRESS="123 Main St, Anytown, USA"' in lines
        assert content.endswith("\n")

    def test_quotes_are_escaped(self):
        """Test that embedded double quotes do not break the value"""
        content = render_env_file("my-app", SiteConfig(description='The "best" app'))

        assert 'NEXT_PUBLIC_APP_DESCRIPTION="The \\"best\\" app"' in content


class TestDocsTemplates:
    """Tests for the documentation templates"""

    def test_meta_lists_every_page(self):
        """Test that the sidebar meta matches the generated pages"""
        meta = json.loads(docs.DOCS_META)
        assert meta["pages"] == ["index", "quick-start", "api"]

    def test_pages_have_front_matter(self):
        """Test that every MDX page starts with a title"""
        for content in docs.DOCS_PAGES.values():
            assert content.startswith("---\ntitle: ")


class TestPageTemplates:
    """Tests for the static page templates"""

    def test_text_pages_link_home(self):
        """Test that every text page renders its heading and the home link"""
        for page, title in (
            (pages.ABOUT_PAGE, "About Us"),
            (pages.PRIVACY_PAGE, "Privacy Policy"),
            (pages.TERMS_PAGE, "Terms of Service"),
        ):
            assert f">{title}</h1>" in page
            assert 'href="/"' in page
            assert page.count("{") == page.count("}")
