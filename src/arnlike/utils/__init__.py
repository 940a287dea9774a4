"""Internal helpers for arnlike."""
