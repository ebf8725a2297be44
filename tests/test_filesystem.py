"""Tests for file-system helpers"""

from __future__ import annotations

import os
import stat
from unittest.mock import patch

import pytest

from basinas.domain.patches.layout import THEME_PROVIDER_RULE
from basinas.infrastructure.filesystem import (
    move_into_group,
    read_text,
    write_file_with_dirs,
    write_text_atomic,
)
from basinas.infrastructure.text_patcher import IdempotentTextPatcher


class TestWriteFile:
    """Tests for writing generated files"""

    def test_creates_parent_directories(self, tmp_path):
        """Test that nested parents are created"""
        target = tmp_path / "app" / "docs" / "[[...slug]]" / "page.tsx"

        written = write_file_with_dirs(target, "export default function Page() {}\n")

        assert written == target
        assert read_text(target) == "export default function Page() {}\n"

    def test_overwrites_existing_file(self, tmp_path):
        """Test that writing twice keeps the latest content"""
        target = tmp_path / "page.tsx"
        write_file_with_dirs(target, "first")
        write_file_with_dirs(target, "second")

        assert read_text(target) == "second"

    def test_atomic_write_leaves_no_temp_files(self, tmp_path):
        """Test that the temporary file is renamed into place"""
        target = tmp_path / "layout.tsx"
        write_text_atomic(target, "content")

        assert [p.name for p in tmp_path.iterdir()] == ["layout.tsx"]

    def test_failed_write_keeps_original(self, tmp_path):
        """Test that a failing rename leaves the original file and no temp file"""
        target = tmp_path / "layout.tsx"
        target.write_text("original", encoding="utf-8")

        with patch("basinas.infrastructure.filesystem.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                write_text_atomic(target, "new")

        assert target.read_text(encoding="utf-8") == "original"
        assert [p.name for p in tmp_path.iterdir()] == ["layout.tsx"]

    def test_preserves_line_endings(self, tmp_path):
        """Test that content is written byte-for-byte"""
        target = tmp_path / "file.txt"
        write_text_atomic(target, "a\r\nb\n")

        assert target.read_bytes() == b"a\r\nb\n"


class TestMoveIntoGroup:
    """Tests for relocating routes into a route group"""

    def _make_app(self, root):
        app = root / "app"
        (app / "about").mkdir(parents=True)
        (app / "about" / "page.tsx").write_text("about", encoding="utf-8")
        (app / "layout.tsx").write_text("layout", encoding="utf-8")
        (app / "page.tsx").write_text("home", encoding="utf-8")
        (app / "globals.css").write_text("css", encoding="utf-8")
        return app

    def test_moves_listed_entries(self, tmp_path):
        """Test that files and directories move into the group"""
        app = self._make_app(tmp_path)

        moved = move_into_group(app, "(main)", ["layout.tsx", "page.tsx", "about"])

        assert moved == ["layout.tsx", "page.tsx", "about"]
        assert (app / "(main)" / "layout.tsx").read_text(encoding="utf-8") == "layout"
        assert (app / "(main)" / "about" / "page.tsx").exists()
        assert not (app / "about").exists()
        # Unlisted entries stay put
        assert (app / "globals.css").exists()

    def test_missing_entries_are_skipped(self, tmp_path):
        """Test that absent names are ignored"""
        app = self._make_app(tmp_path)

        moved = move_into_group(app, "(main)", ["loading.tsx", "page.tsx"])

        assert moved == ["page.tsx"]

    def test_second_run_is_noop(self, tmp_path):
        """Test that relocating again moves nothing"""
        app = self._make_app(tmp_path)
        move_into_group(app, "(main)", ["layout.tsx", "about"])

        moved = move_into_group(app, "(main)", ["layout.tsx", "about"])

        assert moved == []
        assert (app / "(main)" / "layout.tsx").read_text(encoding="utf-8") == "layout"

    def test_regenerated_entries_replace_grouped_ones(self, tmp_path):
        """Test that entries written again after a move leave no duplicates"""
        app = self._make_app(tmp_path)
        move_into_group(app, "(main)", ["page.tsx", "about"])
        (app / "page.tsx").write_text("home v2", encoding="utf-8")
        (app / "about").mkdir()
        (app / "about" / "page.tsx").write_text("about v2", encoding="utf-8")

        moved = move_into_group(app, "(main)", ["page.tsx", "about"])

        assert moved == ["page.tsx", "about"]
        assert not (app / "page.tsx").exists()
        assert not (app / "about").exists()
        assert (app / "(main)" / "page.tsx").read_text(encoding="utf-8") == "home v2"
        assert (app / "(main)" / "about" / "page.tsx").read_text(encoding="utf-8") == "about v2"


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
class TestFileMode:
    """Tests for permission bits of written files"""

    def test_new_file_gets_umask_mode(self, tmp_path, umask_022):
        """Test that a new file is world-readable under umask 022"""
        target = tmp_path / "components" / "header.tsx"

        write_file_with_dirs(target, "header")

        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    def test_overwrite_keeps_existing_mode(self, tmp_path, umask_022):
        """Test that replacing a file keeps its permission bits"""
        target = tmp_path / "package.json"
        target.write_text("{}", encoding="utf-8")
        os.chmod(target, 0o640)

        write_text_atomic(target, '{"name": "my-app"}')

        assert stat.S_IMODE(target.stat().st_mode) == 0o640

    def test_patched_file_keeps_mode(self, tmp_path, umask_022):
        """Test that patching a generated file does not narrow its permissions"""
        target = tmp_path / "layout.tsx"
        target.write_text("<body>content</body>", encoding="utf-8")
        os.chmod(target, 0o644)

        result = IdempotentTextPatcher().patch_file(target, [THEME_PROVIDER_RULE])

        assert result.changed
        assert stat.S_IMODE(target.stat().st_mode) == 0o644
