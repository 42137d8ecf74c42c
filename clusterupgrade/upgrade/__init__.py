"""Component version reconciliation."""

from .reconciler import ComponentVersionReconciler

__all__ = ["ComponentVersionReconciler"]
