"""folioctl — portfolio catalog query and static site toolkit."""

__version__ = "0.4.0"
