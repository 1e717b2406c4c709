"""Ports describing the share client, MIME detection and the adapter contract."""
