"""Infrastructure: persistence, external integrations and service implementations."""
