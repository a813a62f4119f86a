"""
Application layer package.
"""
