"""
Integration tests for linking references in markdown text.

Markdown is parsed with mistune, linked, and rendered back to markdown.
"""

import pytest

from github_linkify import GitHubLinkifier, LinkifyConfig
from github_linkify.core.nodes import (
    InlineCodeNode, LinkNode, LinkReferenceNode, OtherNode, StrongNode, TextNode
)
from github_linkify.formatters.markdown_formatter import (
    MarkdownFormatter, tokens_to_tree, tree_to_tokens
)


class TestTokenConversion:
    """Test conversion between mistune tokens and nodes."""

    TOKENS = [
        {'type': 'heading', 'attrs': {'level': 1}, 'style': 'atx', 'children': [
            {'type': 'text', 'raw': 'Title'},
        ]},
        {'type': 'paragraph', 'children': [
            {'type': 'text', 'raw': 'see '},
            {'type': 'codespan', 'raw': 'code'},
            {'type': 'strong', 'children': [{'type': 'text', 'raw': 'bold'}]},
            {'type': 'link', 'children': [{'type': 'text', 'raw': 'here'}],
             'attrs': {'url': 'https://example.com', 'title': 'Example'}},
            {'type': 'link', 'children': [{'type': 'text', 'raw': 'ref'}],
             'attrs': {'url': 'https://example.com'}, 'label': 'ref', 'ref': 'ref'},
            {'type': 'image', 'children': [{'type': 'text', 'raw': '@tivie'}],
             'attrs': {'url': 'a.png'}},
            {'type': 'softbreak'},
        ]},
    ]

    def test_tokens_to_tree(self):
        tree = tokens_to_tree(self.TOKENS)

        heading, para = tree.children
        assert tree.type == 'root'
        assert heading == OtherNode(kind='heading', children=[TextNode('Title')],
                                    payload={'attrs': {'level': 1}, 'style': 'atx'})
        assert para.children[0] == TextNode('see ')
        assert para.children[1] == InlineCodeNode('code')
        assert para.children[2] == StrongNode(children=[TextNode('bold')])
        assert para.children[3] == LinkNode(url='https://example.com', title='Example',
                                            children=[TextNode('here')])
        assert isinstance(para.children[4], LinkReferenceNode)
        assert para.children[5].children is None
        assert para.children[6] == OtherNode(kind='softbreak')

    def test_round_trip(self):
        assert tree_to_tokens(tokens_to_tree(self.TOKENS)) == self.TOKENS


class TestMarkdownFormatter:
    """Test linking in markdown source."""

    @pytest.fixture(autouse=True)
    def setup(self):
        self.formatter = MarkdownFormatter()
        yield

    def test_mention(self):
        result = self.formatter.format("hello there @tivie")
        assert "[**@tivie**](https://github.com/tivie)" in result

    def test_issue_reference(self):
        result = self.formatter.format("Fixed in wooorm/remark-github#1.")
        assert "[#1](https://github.com/wooorm/remark-github/issues/1)" in result

    def test_commit_reference(self):
        result = self.formatter.format("Fixed in wooorm/remark-github@bc3c3a1e0a0d0f7b.")
        assert "[@`bc3c3a1`](https://github.com/wooorm/remark-github/commit/bc3c3a1e0a0d0f7b)" in result

    def test_angle_autolink_relabeled(self):
        url = "https://github.com/wooorm/remark-github/commit/abcdef1234567890"
        result = self.formatter.format(f"See <{url}>")
        assert f"[wooorm@`abcdef1`]({url})" in result

    def test_bare_url_relabeled(self):
        url = "https://github.com/wooorm/remark-github/issues/12"
        result = self.formatter.format(f"See {url} for details")
        assert f"[wooorm#12]({url})" in result

    def test_custom_label_untouched(self):
        source = "[the fix](https://github.com/wooorm/remark-github/commit/abcdef1234567890)"
        assert self.formatter.format(source).strip() == source

    def test_code_not_linked(self):
        result = self.formatter.format("Use `@tivie` here\n\n```\n@tivie wooorm/remark#1\n```")
        assert "](https://github.com/tivie)" not in result
        assert "issues/1" not in result
        assert "`@tivie`" in result

    def test_plain_text_unchanged(self):
        assert self.formatter.format("Nothing to link here.").strip() == "Nothing to link here."

    def test_empty_text(self):
        assert self.formatter.format("") == ""

    def test_configured_linkifier(self):
        linkifier = GitHubLinkifier(LinkifyConfig({'mention_strong': False}))
        result = MarkdownFormatter(linkifier).format("hi @tivie")
        assert "[@tivie](https://github.com/tivie)" in result
