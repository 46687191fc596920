"""Claim Status Tracker package."""

__all__ = [
    "api_gateway",
    "cli",
    "config",
    "content",
    "preflight",
    "scenarios",
    "schemas",
    "utils",
    "web_app",
]
