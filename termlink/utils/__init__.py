"""Utility helpers for termlink."""
