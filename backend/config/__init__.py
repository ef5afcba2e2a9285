"""
Configuration package.

Environment-driven settings consumed at startup (database, logging, server).
"""
