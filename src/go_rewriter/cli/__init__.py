"""
Command Line Interface for go-rewriter.
"""
