"""
Tests de rdlauncher.core.launch.tokens — tabla de alias y patrón.
"""

import pytest

from rdlauncher.core.launch.tokens import (
    TOKEN_TABLE,
    TokenClass,
    iter_tokens,
    lookup_alias,
    token_pattern,
)


class TestTokenTable:
    def test_order_is_native_name_portable(self):
        assert [spec.token_class for spec in TOKEN_TABLE] == [
            TokenClass.WORKSPACE_ROOT,
            TokenClass.PROJECT_ROOT,
            TokenClass.PROJECT_NAME,
            TokenClass.WORKSPACE_ROOT_PORTABLE,
            TokenClass.PROJECT_ROOT_PORTABLE,
        ]

    def test_every_class_has_one_entry(self):
        classes = [spec.token_class for spec in TOKEN_TABLE]
        assert sorted(classes) == sorted(TokenClass)

    def test_aliases_are_unique_ignoring_case(self):
        aliases = [a.lower() for spec in TOKEN_TABLE for a in spec.aliases]
        assert len(aliases) == len(set(aliases))

    def test_iter_tokens_wraps_in_percent(self):
        tokens = list(iter_tokens())
        assert (TokenClass.PROJECT_NAME, "%projName%") in tokens
        assert all(t.startswith("%") and t.endswith("%") for _, t in tokens)
        assert len(tokens) == 16


class TestLookupAlias:
    @pytest.mark.parametrize("alias,expected", [
        ("SolutionRoot", TokenClass.WORKSPACE_ROOT),
        ("rootdir", TokenClass.WORKSPACE_ROOT),
        ("%projDir%", TokenClass.PROJECT_ROOT),
        ("PROJECTNAME", TokenClass.PROJECT_NAME),
        ("rootForBash", TokenClass.WORKSPACE_ROOT_PORTABLE),
        ("projectDirectoryForBash", TokenClass.PROJECT_ROOT_PORTABLE),
    ])
    def test_known(self, alias, expected):
        assert lookup_alias(alias) is expected

    def test_unknown(self):
        assert lookup_alias("foo") is None


class TestTokenPattern:
    def test_matches_case_insensitively(self):
        match = token_pattern().search("x %PROJECTNAME% y")
        assert match is not None
        assert match.lastgroup == "PROJECT_NAME"

    def test_portable_alias_is_not_a_native_match(self):
        match = token_pattern().search("%rootForBash%")
        assert match.lastgroup == "WORKSPACE_ROOT_PORTABLE"
        assert match.group(0) == "%rootForBash%"

    def test_requires_both_delimiters(self):
        assert token_pattern().search("%projectRoot") is None
        assert token_pattern().search("projectRoot%") is None

    def test_unknown_alias_does_not_match(self):
        assert token_pattern().search("%foo%") is None
