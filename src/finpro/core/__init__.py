"""Core plumbing: configuration, exceptions, logging, CLI."""
