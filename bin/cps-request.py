#!/usr/bin/env python3
"""
cps-request - Build a CPS request, print it or send it to a server
"""

import sys

from CPS.Client.Cli import main

if __name__ == '__main__':
    sys.exit(main())
