"""Query handlers (read side)."""
