"""Infrastructure shared across features: logging and the SMB transport."""
