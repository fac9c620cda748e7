"""
message_rag: retrieval-augmented ingestion for conversation messages.

Chunks message text, embeds the fragments with a hosted embedding model,
persists the vectors in Postgres (pgvector) and serves similarity search.
"""

__version__ = "0.1.0"
