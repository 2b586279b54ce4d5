"""Tests for ethtx.protocol."""
