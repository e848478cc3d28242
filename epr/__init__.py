"""
EPR CLI - Command line client for the Event Provenance Registry.
"""

__version__ = "0.1.0"
