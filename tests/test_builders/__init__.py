"""Tests for ethtx.builders."""
