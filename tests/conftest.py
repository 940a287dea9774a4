"""Shared fixtures for the arnlike test suite."""

from __future__ import annotations

import pytest


@pytest.fixture
def role_arn() -> str:
    """A well-formed IAM role ARN with an empty region."""
    return "arn:aws:iam::000000000000:role/some-role"


@pytest.fixture
def wacky_arn() -> str:
    """An ARN whose resource contains regex metacharacters."""
    return r"arn:aws:testservice::000000000000:some/wacky-new-[resource]{with}\metacharacters"
