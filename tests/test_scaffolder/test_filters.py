"""Tests for the skip filter (starter.scaffolder.filters)."""

from __future__ import annotations

from pathlib import Path

import pytest

from starter.config import EXAMPLE_SKIP_TOKENS, BuildInfo
from starter.scaffolder.filters import should_skip

pytestmark = pytest.mark.unit


PATHS = [
    "/tpl/webmvc/build.gradle",
    "/tpl/webmvc/src/main/java/Application.java",
    "/tpl/webmvc/src/main/java/example/ExampleController.java",
    "/tpl/webmvc/.DS_Store",
    "relative/path/file.txt",
]


class TestShouldSkip:
    @pytest.mark.parametrize("path", PATHS)
    def test_no_tokens_never_skips(self, path):
        info = BuildInfo(skip_tokens=())
        assert should_skip(path, info) is False

    @pytest.mark.parametrize(
        "token",
        ["/tpl", "webmvc/src", ".java", "Controller", "e", "/tpl/webmvc/src/main/java/example/ExampleController.java"],
    )
    def test_substring_anywhere_skips(self, token):
        info = BuildInfo(skip_tokens=(token,))
        assert should_skip("/tpl/webmvc/src/main/java/example/ExampleController.java", info) is True

    def test_any_token_is_enough(self):
        info = BuildInfo(skip_tokens=("nope", "missing", ".DS_Store"))
        assert should_skip("/tpl/webmvc/.DS_Store", info) is True

    def test_no_match(self, default_info):
        assert should_skip("/tpl/webmvc/build.gradle", default_info) is False

    def test_literal_not_glob(self):
        info = BuildInfo(skip_tokens=("*.java",))
        assert should_skip("/tpl/App.java", info) is False
        assert should_skip("/tpl/*.java", info) is True

    def test_case_sensitive(self):
        info = BuildInfo(skip_tokens=("Example",))
        assert should_skip("/tpl/example.txt", info) is False

    def test_accepts_path_objects(self, default_info):
        assert should_skip(Path("/tpl/.DS_Store"), default_info) is True

    def test_example_tokens(self, default_info):
        info = default_info.with_example_skip_tokens()
        assert should_skip("/tpl/src/main/java/example/ExampleController.java", info) is True
        assert should_skip("/tpl/src/main/java/Application.java", info) is False
        assert EXAMPLE_SKIP_TOKENS

    def test_matches_template_location_too(self, default_info):
        info = default_info.with_example_skip_tokens()
        assert should_skip("/home/Example/templates/webmvc/build.gradle", info) is True
        assert should_skip("/home/dev/templates/webmvc/build.gradle", info) is False
