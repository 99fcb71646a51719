"""Application layer wiring features for user interfaces."""
