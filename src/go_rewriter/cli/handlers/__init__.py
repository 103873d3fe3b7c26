"""
CLI Command Handlers.
"""
