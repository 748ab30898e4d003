"""
User Registry
=============

Layered user service: controller -> application service -> domain service
-> repository -> in-memory store.
"""

__version__ = "1.0.0"
