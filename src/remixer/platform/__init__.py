"""Infrastructure helpers shared by every feature."""
