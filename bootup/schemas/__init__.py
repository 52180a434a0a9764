"""Packaged JSON schemas used to validate user-supplied configuration files."""
