"""
Infrastructure Layer
====================

Concrete storage implementations behind the domain repository interfaces.
"""
