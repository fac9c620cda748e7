"""Boundary adapters: database and hosted embedding model."""
