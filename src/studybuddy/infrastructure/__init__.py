"""Infrastructure layer: auth, persistence and the HTTP API."""
