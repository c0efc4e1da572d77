"""Hosted backend adapters (auth + storage).

Import concrete clients from their modules; this package stays import-light.
"""

__all__ = []
