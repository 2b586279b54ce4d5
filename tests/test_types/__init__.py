"""Tests for ethtx.types."""
