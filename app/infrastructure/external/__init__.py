"""External integrations (outbound HTTP APIs)."""
