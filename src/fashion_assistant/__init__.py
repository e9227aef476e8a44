"""Fashion store multi-agent assistant: agent provisioning service."""

__version__ = "0.1.0"
