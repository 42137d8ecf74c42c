"""Kubernetes interaction module."""

from .client import K8sClient
from .image import parse_component_image, parse_image_reference

__all__ = ["K8sClient", "parse_component_image", "parse_image_reference"]
