"""Access to the local container runtime (podman or docker CLI)."""
