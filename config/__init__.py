"""Configuration package - Environment-driven settings."""
