"""Infrastructure adapters: HTTP client, settings, logging."""
