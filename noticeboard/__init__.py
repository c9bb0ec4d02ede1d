"""
Notices backend.

Registration, single-session authentication, profile and avatar management,
and the user-favorites relation over MongoDB.
"""
