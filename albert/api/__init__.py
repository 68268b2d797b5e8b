"""
HTTP API for the podcast generator.
"""
