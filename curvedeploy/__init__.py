"""Task running, tool-output parsing and config rewriting for Curve cluster deployment."""

__version__ = "0.1.0"