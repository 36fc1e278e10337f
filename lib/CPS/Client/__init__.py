"""
CPS Client

Request construction layer of the CPS client: typed request classes turning
a caller intent into a command plus parameters, serialized as XML.
"""

from CPS.Client.Version import VERSION, PROVIDER, COMMENTS, USER_AGENT
from CPS.Client.Command import Command
from CPS.Client.Request import *  # noqa: F401,F403
from CPS.Client.Request import __all__ as _request_all

VERSION_STRING = f"{PROVIDER} Client ({VERSION})"

__all__ = ['VERSION', 'PROVIDER', 'COMMENTS', 'USER_AGENT', 'VERSION_STRING', 'Command'] + _request_all
