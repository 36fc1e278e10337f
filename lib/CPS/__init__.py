"""
CPS - Python client for the CPS document search and indexing engine.
"""
