"""Tests for TableResize."""
