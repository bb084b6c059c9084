"""Test fixtures and shared schemas."""
