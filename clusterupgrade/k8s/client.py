"""Kubernetes client wrapper."""

import subprocess
from typing import List, Optional, Tuple

from ..utils.logger import get_logger

logger = get_logger(__name__)

SYSTEM_NAMESPACE = "kube-system"
CONTAINER_IMAGE_JSONPATH = "jsonpath='{.spec.template.spec.containers[0].image}'"


class K8sClient:
    """Read-only wrapper for kubectl commands."""

    def __init__(self, context: Optional[str] = None, namespace: Optional[str] = None):
        self.context = context
        self.namespace = namespace
        self._verify_kubectl()

    def _verify_kubectl(self):
        """Verify kubectl is available."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise RuntimeError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str]) -> List[str]:
        """Build kubectl command with context and namespace."""
        cmd = ["kubectl"]

        if self.context:
            cmd.extend(["--context", self.context])

        cmd.extend(args)

        if self.namespace and "-n" not in args:
            cmd.extend(["-n", self.namespace])

        return cmd

    def execute(self, args: List[str]) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed: {e.stderr}")
            return False, e.stderr

    def get_workload_image(
        self, object_type: str, object_name: str, namespace: str = SYSTEM_NAMESPACE
    ) -> Optional[str]:
        """Get the raw image output of the first container of a workload.

        The output keeps the quotes of the jsonpath template, e.g.
        ``'602401143452.dkr.ecr.eu-west-1.amazonaws.com/eks/kube-proxy:v1.27.4'``.
        """
        args = ["get", object_type, object_name, "-n", namespace, "-o", CONTAINER_IMAGE_JSONPATH]
        success, output = self.execute(args)
        if success and output.strip():
            return output
        logger.warning(f"Unable to read image of {object_type}/{object_name} in {namespace}")
        return None
