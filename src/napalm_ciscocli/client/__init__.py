"""SSH transport, CLI session and device read/write operations."""
