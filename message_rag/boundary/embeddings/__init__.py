"""Hosted embedding model adapter."""

from message_rag.boundary.embeddings.client import build_embedding_client

__all__ = ["build_embedding_client"]
