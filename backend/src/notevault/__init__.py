"""
NoteVault Backend - personal notes API.

Accounts register and log in for a signed bearer token; every note operation
is scoped to the account the token names.
"""

__version__ = "1.0.0"
