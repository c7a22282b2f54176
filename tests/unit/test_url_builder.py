"""
Unit tests for URL building and the build_url override hook.
"""

from unittest.mock import MagicMock

import pytest

from github_linkify.services.url_builder import (
    CallableUrlBuildStrategy, CommitValue, CompareValue, IssueValue, MentionValue,
    UrlBuilder, UrlBuildStrategy, coerce_strategy, default_build_url
)


class TestDefaultBuildUrl:
    """Test the default github.com URL scheme."""

    @pytest.mark.parametrize("value,expected", [
        (MentionValue(user="tivie"), "https://github.com/tivie"),
        (MentionValue(user="remarkjs/core"), "https://github.com/remarkjs/core"),
        (CommitValue(user="wooorm", project="remark", hash="abcdef1234"),
         "https://github.com/wooorm/remark/commit/abcdef1234"),
        (IssueValue(user="wooorm", project="remark", no="42"),
         "https://github.com/wooorm/remark/issues/42"),
        (CompareValue(user="wooorm", project="remark", base="abcdef1", compare="1234567"),
         "https://github.com/wooorm/remark/compare/abcdef1...1234567"),
    ])
    def test_urls(self, value, expected):
        assert default_build_url(value) == expected

    @pytest.mark.parametrize("value", [
        CommitValue(user="wooorm", project=None, hash="abcdef1"),
        IssueValue(user="wooorm", project=None, no="1"),
        CompareValue(user="wooorm", project="", base="abcdef1", compare="1234567"),
    ])
    def test_missing_project_is_not_linked(self, value):
        assert default_build_url(value) is False

    def test_value_types(self):
        assert MentionValue(user="a").type == "mention"
        assert CommitValue(user="a", project="b", hash="c").type == "commit"
        assert CompareValue(user="a", project="b", base="c", compare="d").type == "compare"
        assert IssueValue(user="a", project="b", no="1").type == "issue"


class TestUrlBuilder:
    """Test strategy resolution in UrlBuilder."""

    def test_default_strategy(self, url_builder):
        assert url_builder.build(MentionValue(user="tivie")) == "https://github.com/tivie"

    def test_default_strategy_suppresses_missing_project(self, url_builder):
        assert url_builder.build(IssueValue(user="wooorm", project=None, no="1")) is None

    def test_override_receives_value_and_default(self):
        hook = MagicMock(return_value="https://example.com/tivie")
        builder = UrlBuilder(CallableUrlBuildStrategy(hook))
        value = MentionValue(user="tivie")

        assert builder.build(value) == "https://example.com/tivie"
        hook.assert_called_once_with(value, default_build_url)

    def test_override_can_delegate(self):
        builder = UrlBuilder(CallableUrlBuildStrategy(lambda value, default: default(value)))
        assert builder.build(IssueValue(user="a", project="b", no="1")) == "https://github.com/a/b/issues/1"

    @pytest.mark.parametrize("result", [False, None, ""])
    def test_override_can_suppress(self, result):
        builder = UrlBuilder(CallableUrlBuildStrategy(lambda value, default: result))
        assert builder.build(MentionValue(user="tivie")) is None

    def test_non_string_result_is_ignored(self, caplog):
        builder = UrlBuilder(CallableUrlBuildStrategy(lambda value, default: 42))

        with caplog.at_level("WARNING", logger="github_linkify"):
            assert builder.build(MentionValue(user="tivie")) is None
        assert "expected a string" in caplog.text

    def test_strategy_subclass(self):
        class GitLabStrategy(UrlBuildStrategy):
            def build(self, value, default_build):
                if value.type == "mention":
                    return "https://gitlab.com/" + value.user
                return default_build(value)

        builder = UrlBuilder(GitLabStrategy())
        assert builder.build(MentionValue(user="tivie")) == "https://gitlab.com/tivie"
        assert builder.build(CommitValue(user="a", project="b", hash="c")) == "https://github.com/a/b/commit/c"


class TestCoerceStrategy:
    """Test conversion of the build_url option."""

    def test_strategy_passes_through(self):
        strategy = UrlBuildStrategy()
        assert coerce_strategy(strategy) is strategy

    def test_callable_is_wrapped(self):
        func = lambda value, default: False
        strategy = coerce_strategy(func)
        assert isinstance(strategy, CallableUrlBuildStrategy)
        assert strategy.func is func

    @pytest.mark.parametrize("value", ["https://example.com", 42, {"type": "mention"}])
    def test_invalid_values(self, value):
        assert coerce_strategy(value) is None
