"""Kernel version reporting."""

VERSION = "0.0.0"


def version() -> str:
    """Return the kernel version string."""
    return VERSION