"""Typed records built from device output."""
