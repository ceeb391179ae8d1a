"""Infrastructure: logging setup and other process-level concerns."""
