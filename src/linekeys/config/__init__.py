"""Configuration loading and validation for linekeys."""
