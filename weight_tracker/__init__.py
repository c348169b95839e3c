"""Weight tracking dashboard service."""
