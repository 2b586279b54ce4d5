"""Tests for ethtx.utils."""
