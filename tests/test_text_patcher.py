"""Tests for IdempotentTextPatcher and anchored rules"""

from __future__ import annotations

import os
import re

import pytest

from basinas.domain.models.patch_rule import PatchApplicationError, PatchRule, anchored_rule
from basinas.domain.patches.layout import THEME_PROVIDER_RULE
from basinas.infrastructure.text_patcher import IdempotentTextPatcher


@pytest.fixture
def patcher():
    return IdempotentTextPatcher()


def _append_rule(name: str, text: str) -> PatchRule:
    return PatchRule(name=name, detect=lambda c: text in c, transform=lambda c: c + text)


class TestApply:
    """Tests for applying rules to content"""

    def test_wraps_body_in_theme_provider(self, patcher):
        """Test the body wrapper on minimal content"""
        result = patcher.apply("<body>content</body>", [THEME_PROVIDER_RULE])

        assert result.applied == ["layout-theme-provider"]
        assert "<ThemeProvider" in result.content
        assert "content" in result.content
        assert result.content.startswith("<body>")
        assert result.content.endswith("</body>")

    def test_second_application_is_identity(self, patcher):
        """Test that re-applying the same rule leaves content unchanged"""
        once = patcher.apply("<body>content</body>", [THEME_PROVIDER_RULE]).content

        again = patcher.apply(once, [THEME_PROVIDER_RULE])

        assert again.content == once
        assert again.applied == []
        assert again.skipped == ["layout-theme-provider"]
        assert not again.changed
        assert once.count("<ThemeProvider") == 1

    def test_missing_anchor_raises(self, patcher):
        """Test that an absent anchor raises PatchApplicationError"""
        rule = anchored_rule(
            "stylesheet-import",
            marker="fonts",
            anchor="globals.css",
            replacement='globals.css";\nimport "./fonts',
        )

        with pytest.raises(PatchApplicationError) as exc_info:
            patcher.apply("export default function Layout() {}", [rule])

        assert exc_info.value.rule == "stylesheet-import"
        assert "anchor not found" in str(exc_info.value)

    def test_rules_apply_in_order(self, patcher):
        """Test that a later rule can anchor on text inserted by an earlier one"""
        first = _append_rule("first", "<first/>")
        second = anchored_rule(
            "second", marker="<second/>", anchor="<first/>", replacement="<first/><second/>"
        )

        result = patcher.apply("start", [first, second])

        assert result.content == "start<first/><second/>"
        assert result.applied == ["first", "second"]

    def test_reversed_order_fails(self, patcher):
        """Test that the dependent rule fails when its anchor is not yet present"""
        first = _append_rule("first", "<first/>")
        second = anchored_rule(
            "second", marker="<second/>", anchor="<first/>", replacement="<first/><second/>"
        )

        with pytest.raises(PatchApplicationError, match="second"):
            patcher.apply("start", [second, first])

    def test_partial_application_is_completed(self, patcher):
        """Test that only the missing rules run on partially patched content"""
        rules = [_append_rule("a", "[a]"), _append_rule("b", "[b]")]

        result = patcher.apply("x[a]", rules)

        assert result.content == "x[a][b]"
        assert result.skipped == ["a"]
        assert result.applied == ["b"]

    def test_transform_must_satisfy_detector(self, patcher):
        """Test that a transform not producing its marker is rejected"""
        broken = PatchRule(name="broken", detect=lambda c: "marker" in c, transform=lambda c: c + "x")

        with pytest.raises(PatchApplicationError, match="broken"):
            patcher.apply("content", [broken])

    def test_no_rules(self, patcher):
        """Test that an empty rule list returns the content unchanged"""
        result = patcher.apply("content", [])
        assert result.content == "content"
        assert not result.changed


class TestAnchoredRule:
    """Tests for the anchored_rule builder"""

    def test_literal_anchor_is_escaped(self):
        """Test that regex metacharacters in string anchors match literally"""
        rule = anchored_rule("r", marker="done", anchor="a.b(c)", replacement="done")

        assert rule.transform("xa.b(c)y") == "xdoney"
        with pytest.raises(PatchApplicationError):
            rule.transform("xaXb(c)y")

    def test_only_first_anchor_replaced(self):
        """Test that only the first anchor occurrence is substituted"""
        rule = anchored_rule("r", marker="B", anchor="a", replacement="B")
        assert rule.transform("aaa") == "Baa"

    def test_callable_replacement_receives_match(self):
        """Test that a callable replacement gets the regex match"""
        rule = anchored_rule(
            "r",
            marker=re.compile(r"<b>\d+</b>"),
            anchor=re.compile(r"(\d+)"),
            replacement=lambda m: f"<b>{m.group(1)}</b>",
        )

        assert rule.transform("value 42") == "value <b>42</b>"
        assert rule.is_applied("value <b>42</b>")

    def test_pattern_marker(self):
        """Test detection with a compiled pattern marker"""
        rule = anchored_rule("r", marker=re.compile(r"docs", re.I), anchor="x", replacement="y")
        assert rule.is_applied("DOCS")
        assert not rule.is_applied("nothing")


class TestPatchFile:
    """Tests for patching files on disk"""

    def test_writes_patched_content(self, patcher, tmp_path):
        """Test that applied rules are written back"""
        target = tmp_path / "layout.tsx"
        target.write_text("<body>content</body>", encoding="utf-8")

        result = patcher.patch_file(target, [THEME_PROVIDER_RULE])

        assert result.changed
        assert result.path == str(target)
        assert "<ThemeProvider" in target.read_text(encoding="utf-8")

    def test_does_not_write_when_up_to_date(self, patcher, tmp_path):
        """Test that a fully patched file is left untouched"""
        target = tmp_path / "layout.tsx"
        target.write_text("<body>content</body>", encoding="utf-8")
        patcher.patch_file(target, [THEME_PROVIDER_RULE])
        patched = target.read_text(encoding="utf-8")
        os.utime(target, (1_000_000, 1_000_000))

        result = patcher.patch_file(target, [THEME_PROVIDER_RULE])

        assert not result.changed
        assert target.read_text(encoding="utf-8") == patched
        assert target.stat().st_mtime == 1_000_000

    def test_missing_file_raises(self, patcher, tmp_path):
        """Test that a missing target raises PatchApplicationError with the path"""
        target = tmp_path / "missing.tsx"

        with pytest.raises(PatchApplicationError) as exc_info:
            patcher.patch_file(target, [THEME_PROVIDER_RULE])

        assert exc_info.value.path == str(target)
        assert not target.exists()

    def test_anchor_error_carries_path(self, patcher, tmp_path):
        """Test that rule failures are reported with the file path"""
        target = tmp_path / "layout.tsx"
        target.write_text("no body here", encoding="utf-8")

        with pytest.raises(PatchApplicationError) as exc_info:
            patcher.patch_file(target, [THEME_PROVIDER_RULE])

        assert exc_info.value.path == str(target)
        assert exc_info.value.rule == "layout-theme-provider"
        assert str(target) in str(exc_info.value)
        assert target.read_text(encoding="utf-8") == "no body here"

    def test_failure_leaves_file_untouched(self, patcher, tmp_path):
        """Test that a failing later rule prevents writing earlier changes"""
        target = tmp_path / "file.txt"
        target.write_text("start", encoding="utf-8")
        failing = anchored_rule("failing", marker="never", anchor="absent", replacement="never")

        with pytest.raises(PatchApplicationError):
            patcher.patch_file(target, [_append_rule("ok", "[ok]"), failing])

        assert target.read_text(encoding="utf-8") == "start"
