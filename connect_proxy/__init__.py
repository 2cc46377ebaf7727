"""
Connect Proxy: resolves connect cluster names to their pre-configured clients.
"""

__version__ = "1.0.0"
