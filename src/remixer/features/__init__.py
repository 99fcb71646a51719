"""Feature packages: metadata, path and organization."""
