"""Configuration and logging runtime for snapscroll."""
