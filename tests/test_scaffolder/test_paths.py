"""Tests for destination path calculation (starter.scaffolder.paths)."""

from __future__ import annotations

from pathlib import Path

import pytest

from starter.config import BuildInfo
from starter.scaffolder.paths import SENTINEL_SUFFIX, package_path, remap

pytestmark = pytest.mark.unit

SRC = Path("/tpl/webmvc")
DEST = Path("/home/me/.msa-starter")


def _remap(rel: str, info: BuildInfo) -> str:
    return remap(SRC / rel, SRC, DEST, info).as_posix()


class TestPackagePath:
    def test_dotted(self):
        assert package_path("com.example") == "com/example"

    def test_single_segment(self):
        assert package_path("demo") == "demo"

    def test_empty(self):
        assert package_path("") == ""

    def test_ignores_empty_segments(self):
        assert package_path(".dev..appkr.") == "dev/appkr"


class TestRemap:
    def test_plain_file(self, demo_info):
        assert _remap("clients/build.gradle", demo_info) == "/home/me/.msa-starter/clients/build.gradle"

    def test_prefix_stable(self, demo_info):
        for rel in ("a.txt", "src/main/java/A.java", "src/test/java/x/B.java", "lib/x.jar.binary"):
            assert _remap(rel, demo_info).startswith(DEST.as_posix())

    def test_main_source_package_inserted(self, demo_info):
        assert _remap("src/main/java/Application.java", demo_info) == (
            "/home/me/.msa-starter/src/main/java/dev/appkr/demo/Application.java"
        )

    def test_test_source_package_inserted(self, demo_info):
        assert _remap("src/test/java/example/ExampleTest.java", demo_info) == (
            "/home/me/.msa-starter/src/test/java/dev/appkr/demo/example/ExampleTest.java"
        )

    def test_resources_untouched(self, demo_info):
        assert _remap("src/main/resources/application.yml", demo_info) == (
            "/home/me/.msa-starter/src/main/resources/application.yml"
        )

    def test_empty_package_leaves_marker(self):
        info = BuildInfo(group_name="", project_name="")
        result = _remap("src/main/java/Application.java", info)
        assert result == "/home/me/.msa-starter/src/main/java/Application.java"
        assert "//" not in result

    def test_sentinel_suffix_stripped(self, demo_info):
        assert _remap("gradle/wrapper/gradle-wrapper.jar.binary", demo_info) == (
            "/home/me/.msa-starter/gradle/wrapper/gradle-wrapper.jar"
        )

    def test_sentinel_only_at_end(self, demo_info):
        assert _remap("docs/binary-notes.md", demo_info).endswith("docs/binary-notes.md")
        assert _remap("docs/x.binary.txt", demo_info).endswith("docs/x.binary.txt")

    def test_sentinel_stripped_once(self, demo_info):
        assert _remap("Foo.jar.binary.binary", demo_info).endswith("Foo.jar.binary")

    def test_sentinel_constant(self):
        assert SENTINEL_SUFFIX == ".binary"

    def test_root_given_as_string(self, demo_info):
        result = remap("/tpl/webmvc/README.md", "/tpl/webmvc", "/out", demo_info)
        assert result == Path("/out/README.md")

    def test_package_change_changes_only_segment(self):
        a = _remap("src/main/java/App.java", BuildInfo(group_name="com.acme", project_name="one"))
        b = _remap("src/main/java/App.java", BuildInfo(group_name="com.acme", project_name="two"))
        assert a.replace("com/acme/one", "X") == b.replace("com/acme/two", "X")
