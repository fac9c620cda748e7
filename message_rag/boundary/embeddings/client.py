"""
Hosted embedding model client factory.

Builds the LangChain OpenAI embeddings client from settings. The client is
constructed explicitly and injected into EmbeddingGenerator and
RetrievalService; nothing here holds process-wide state.

Dependencies: langchain_openai, message_rag.configs
System role: Adapter for the hosted embedding model
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings

from message_rag.configs.embedding import EmbeddingSettings

logger = logging.getLogger(__name__)

# Only the text-embedding-3 family accepts a dimensions parameter.
_SHORTENABLE_PREFIX = "text-embedding-3"


def build_embedding_client(config: EmbeddingSettings) -> Embeddings:
    """
    Create the hosted embedding client.

    Retries are disabled: ingestion is single-attempt and retry policy
    belongs to the caller.

    Args:
        config: Embedding settings (model, dimensions, timeout, batch size)

    Returns:
        Embeddings: Configured OpenAIEmbeddings instance
    """
    kwargs: dict = {
        "model": config.model,
        "timeout": config.timeout_seconds,
        "chunk_size": config.batch_size,
        "max_retries": 0,
    }
    if config.provider_api_key:
        kwargs["api_key"] = config.provider_api_key
    if config.model.startswith(_SHORTENABLE_PREFIX):
        kwargs["dimensions"] = config.dimensions

    logger.info(
        f"{__name__}:build_embedding_client - model={config.model}, "
        f"dimensions={config.dimensions}, timeout={config.timeout_seconds}s"
    )
    return OpenAIEmbeddings(**kwargs)
