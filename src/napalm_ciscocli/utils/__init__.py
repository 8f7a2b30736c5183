"""Normalization helpers."""
