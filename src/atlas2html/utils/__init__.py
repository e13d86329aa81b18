"""Utility helpers for atlas2html."""
