"""Parsers turning CLI output into typed records."""
