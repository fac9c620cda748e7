"""Hosted embedding client construction."""

from langchain_openai import OpenAIEmbeddings

from message_rag.boundary.embeddings import build_embedding_client
from message_rag.configs.embedding import EmbeddingSettings


def _settings(**overrides) -> EmbeddingSettings:
    return EmbeddingSettings(_env_file=None, provider_api_key="sk-test", **overrides)


def test_builds_openai_client_without_retries():
    client = build_embedding_client(_settings(batch_size=64, timeout_seconds=7.0))

    assert isinstance(client, OpenAIEmbeddings)
    assert client.model == "text-embedding-ada-002"
    assert client.max_retries == 0
    assert client.chunk_size == 64
    assert client.dimensions is None


def test_dimensions_passed_for_shortenable_models():
    client = build_embedding_client(_settings(model="text-embedding-3-large"))

    assert client.dimensions == 1536
