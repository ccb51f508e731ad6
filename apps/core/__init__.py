"""
Core app - Shared infrastructure.

- locks.py: reader/writer lock guarding in-process state
- middleware.py: request logging, JSON error bodies
"""
