"""Application services wiring configuration to the storage feature."""

from .factory import ShareConfigurationError, create_smb_adapter

__all__ = ["ShareConfigurationError", "create_smb_adapter"]
