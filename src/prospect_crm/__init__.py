# ABOUTME: Main package initialization for the prospect CRM tool.
# ABOUTME: Exports version information from the installed distribution metadata.

from importlib.metadata import version

__version__ = version("prospect-crm")
