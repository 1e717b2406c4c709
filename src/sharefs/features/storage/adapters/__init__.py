"""Concrete share clients, MIME detection and the SMB filesystem adapter."""
