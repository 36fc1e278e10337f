"""
CPS Client HTTP Package

Transport glue sending serialized requests to the server.
"""

from CPS.Client.HTTP.Client import Client

__all__ = ['Client']
