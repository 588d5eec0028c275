"""Shared infrastructure: config, logging, exceptions, CLI."""
