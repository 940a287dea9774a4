"""Tests for the arnlike public API surface.

Verifies that all expected names are importable from the top-level
``arnlike`` package and that ``__all__`` is comprehensive.
"""

import arnlike


class TestPublicAPIImports:
    """Every public component must be importable from ``import arnlike``."""

    def test_arn_like_importable(self):
        from arnlike import arn_like

        assert arn_like("arn:aws:iam::0:role/x", "arn:aws:iam::*:role/*") is True

    def test_parse_importable(self):
        from arnlike import parse

        assert parse is not None

    def test_arn_pattern_importable(self):
        from arnlike import ArnPattern

        assert ArnPattern("arn:*:*:*:*:*").matches("arn:aws:s3:::bucket") is True

    def test_errors_importable(self):
        from arnlike import InvalidPrefixError, InvalidSectionCountError, PatternCompilationError

        assert InvalidPrefixError is not None
        assert InvalidSectionCountError is not None
        assert PatternCompilationError is not None


class TestAllList:
    def test_all_names_resolve(self):
        for name in arnlike.__all__:
            assert hasattr(arnlike, name), name

    def test_no_duplicates(self):
        assert len(arnlike.__all__) == len(set(arnlike.__all__))

    def test_version(self):
        assert isinstance(arnlike.__version__, str)
