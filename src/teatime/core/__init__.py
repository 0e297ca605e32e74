"""Ambient plumbing: config, exceptions, logging, file helpers and the CLI."""
