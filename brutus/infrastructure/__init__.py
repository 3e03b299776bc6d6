"""Collaborator implementations: word list lookups and identity matching."""
