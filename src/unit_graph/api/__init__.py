"""
HTTP API for Mini Unit Graph.
"""
