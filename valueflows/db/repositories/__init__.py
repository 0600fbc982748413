"""
Per-domain repository modules for database access.

Every function takes the session it works on as its first argument.
"""
