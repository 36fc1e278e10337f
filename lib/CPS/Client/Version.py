"""
CPS Client Version Module

This module has the only purpose to simplify the way the client is released.
This file could be automatically generated and overridden during packaging.

It permits to re-define client VERSION and client PROVIDER during packaging so
any distributor can clearly identify the origin of the client. Build comments
can be put in COMMENTS and are reported by the --version option.
"""

VERSION = "1.0.dev0"
PROVIDER = "CPS"
COMMENTS = []

USER_AGENT = f"{PROVIDER}-Client/{VERSION}"

__all__ = ['VERSION', 'PROVIDER', 'COMMENTS', 'USER_AGENT']
