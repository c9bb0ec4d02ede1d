"""
User System

Credential store, profile and avatar management, and the favorites relation.
"""
