"""Configuration validation and component version reconciliation for EKS upgrades."""

__version__ = "0.1.0"
