"""
Shared utilities: console/logging and diff rendering.
"""
