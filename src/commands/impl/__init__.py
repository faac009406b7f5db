"""
Command implementations for site recovery operations.
"""

from .apply_recovery_point_command import ApplyRecoveryPointCommand

__all__ = ["ApplyRecoveryPointCommand"]
