"""Smoke tests for the CLI entrypoint.

These tests execute `termlinkc` in a subprocess to validate core user flows.
Keep them fast and end-to-end.
"""
