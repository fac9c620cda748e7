"""
Test suite for EmbeddingGenerator.

Covers batched generation, positional pairing, response validation,
timeouts and all-or-nothing persistence against the in-memory database.
"""

import asyncio
import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from message_rag.boundary.db.CRUD.content_crud import content_crud
from message_rag.boundary.db.CRUD.embedding_crud import embedding_crud
from message_rag.boundary.db.models.embedding_model import EmbeddingModel
from message_rag.core.exceptions import EmbeddingServiceError, PersistenceError
from message_rag.core.ingestion.embedding_generator import EmbeddingGenerator
from message_rag.core.ingestion.models import GeneratedContentOwner, MessageOwner


class TestGeneratorConstruction:
    """Constructor validation."""

    def test_rejects_non_positive_dimensions(self, mock_embeddings) -> None:
        with pytest.raises(ValueError):
            EmbeddingGenerator(embeddings=mock_embeddings, dimensions=0)

    def test_rejects_non_positive_timeout(self, mock_embeddings) -> None:
        with pytest.raises(ValueError):
            EmbeddingGenerator(embeddings=mock_embeddings, timeout_seconds=0)


class TestGenerate:
    """EmbeddingGenerator.generate() behaviour."""

    @pytest.mark.asyncio
    async def test_blank_text_skips_service_call(self, mock_embeddings) -> None:
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        result = await generator.generate("   ")

        assert result == []
        mock_embeddings.aembed_documents.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_sends_all_fragments_in_one_call(self, mock_embeddings, unit_vector) -> None:
        mock_embeddings.aembed_documents.return_value = [unit_vector(0), unit_vector(1)]
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        await generator.generate("A. B")

        mock_embeddings.aembed_documents.assert_awaited_once_with(["A", "B"])

    @pytest.mark.asyncio
    async def test_pairs_vectors_with_fragments_by_position(
        self, mock_embeddings, unit_vector
    ) -> None:
        vectors = [unit_vector(0), unit_vector(1), unit_vector(2)]
        mock_embeddings.aembed_documents.return_value = vectors
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        result = await generator.generate("first. second. third")

        assert [f.content for f in result] == ["first", "second", "third"]
        assert [f.embedding for f in result] == vectors
        assert [f.index for f in result] == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_count_mismatch_raises(self, mock_embeddings, unit_vector) -> None:
        mock_embeddings.aembed_documents.return_value = [unit_vector(0)]
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        with pytest.raises(EmbeddingServiceError) as exc_info:
            await generator.generate("A. B", owner_id="m1")

        assert exc_info.value.details["fragments"] == ["A", "B"]
        assert exc_info.value.details["owner_id"] == "m1"
        assert exc_info.value.details["model"] == "text-embedding-ada-002"

    @pytest.mark.asyncio
    async def test_wrong_dimension_raises(self, mock_embeddings) -> None:
        mock_embeddings.aembed_documents.return_value = [[0.1, 0.2, 0.3]]
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        with pytest.raises(EmbeddingServiceError, match="dimension"):
            await generator.generate("Only one")

    @pytest.mark.asyncio
    async def test_client_exception_is_wrapped(self, mock_embeddings) -> None:
        mock_embeddings.aembed_documents.side_effect = RuntimeError("rate limited")
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        with pytest.raises(EmbeddingServiceError) as exc_info:
            await generator.generate("Hello")

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_timeout_raises_service_error(self, mock_embeddings) -> None:
        async def slow(texts):
            await asyncio.sleep(1)

        mock_embeddings.aembed_documents.side_effect = slow
        generator = EmbeddingGenerator(embeddings=mock_embeddings, timeout_seconds=0.01)

        with pytest.raises(EmbeddingServiceError, match="timed out"):
            await generator.generate("Hello")

    @pytest.mark.asyncio
    async def test_per_call_timeout_overrides_default(self, mock_embeddings) -> None:
        async def slow(texts):
            await asyncio.sleep(1)

        mock_embeddings.aembed_documents.side_effect = slow
        generator = EmbeddingGenerator(embeddings=mock_embeddings, timeout_seconds=30.0)

        with pytest.raises(EmbeddingServiceError, match="timed out after 0.01s"):
            await generator.generate("Hello", timeout_seconds=0.01)

    @pytest.mark.asyncio
    async def test_per_call_timeout_can_extend_default(self, mock_embeddings, unit_vector) -> None:
        async def slightly_slow(texts):
            await asyncio.sleep(0.05)
            return [unit_vector(0)]

        mock_embeddings.aembed_documents.side_effect = slightly_slow
        generator = EmbeddingGenerator(embeddings=mock_embeddings, timeout_seconds=0.01)

        result = await generator.generate("Hello", timeout_seconds=5.0)

        assert [f.content for f in result] == ["Hello"]

    @pytest.mark.asyncio
    async def test_per_call_timeout_must_be_positive(self, mock_embeddings) -> None:
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        with pytest.raises(ValueError):
            await generator.generate("Hello", timeout_seconds=0)
        mock_embeddings.aembed_documents.assert_not_awaited()

    def test_fake_client_is_deterministic(self, fake_embeddings) -> None:
        first = fake_embeddings.embed_documents(["alpha", "beta"])
        second = fake_embeddings.embed_documents(["alpha", "beta"])

        assert first == second
        assert first[0] != first[1]
        assert all(len(vector) == 1536 for vector in first)

    @pytest.mark.asyncio
    async def test_concurrent_calls_do_not_interfere(self, generator) -> None:
        first, second = await asyncio.gather(
            generator.generate("alpha. beta"),
            generator.generate("gamma"),
        )

        assert [f.content for f in first] == ["alpha", "beta"]
        assert [f.content for f in second] == ["gamma"]


class TestIngest:
    """EmbeddingGenerator.ingest() persistence behaviour."""

    @pytest.mark.asyncio
    async def test_blank_text_persists_nothing(self, test_async_db, message, mock_embeddings) -> None:
        message_id = message.id
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        result = await generator.ingest(test_async_db, "   ", MessageOwner(message_id=message_id))

        assert result.fragment_count == 0
        assert result.embedding_ids == []
        assert not result.persisted
        assert await embedding_crud.count_by_message(test_async_db, message_id) == 0
        mock_embeddings.aembed_documents.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_persists_one_row_per_fragment(
        self, test_async_db, message, mock_embeddings, unit_vector
    ) -> None:
        message_id = message.id
        v1, v2 = unit_vector(0), unit_vector(1)
        mock_embeddings.aembed_documents.return_value = [v1, v2]
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        result = await generator.ingest(test_async_db, "A. B", MessageOwner(message_id=message_id))

        records = await embedding_crud.get_by_ids(test_async_db, result.embedding_ids)
        assert [(r.content, list(r.embedding), r.message_id, r.content_id) for r in records] == [
            ("A", v1, message_id, None),
            ("B", v2, message_id, None),
        ]
        assert result.fragment_count == 2

    @pytest.mark.asyncio
    async def test_generated_content_owner(self, test_async_db, user_id, generator) -> None:
        record = await content_crud.create(
            test_async_db, user_id=user_id, content="Summary. Key points"
        )
        await test_async_db.commit()
        content_id = record.id

        result = await generator.ingest(
            test_async_db, "Summary. Key points", GeneratedContentOwner(content_id=content_id)
        )

        rows = await embedding_crud.get_by_ids(test_async_db, result.embedding_ids)
        assert all(r.content_id == content_id and r.message_id is None for r in rows)
        assert await embedding_crud.count_by_content(test_async_db, content_id) == 2

    @pytest.mark.asyncio
    async def test_service_failure_writes_nothing(
        self, test_async_db, message, mock_embeddings
    ) -> None:
        message_id = message.id
        mock_embeddings.aembed_documents.side_effect = RuntimeError("unavailable")
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        with pytest.raises(EmbeddingServiceError):
            await generator.ingest(test_async_db, "A. B", MessageOwner(message_id=message_id))

        assert await embedding_crud.count_by_message(test_async_db, message_id) == 0

    @pytest.mark.asyncio
    async def test_unknown_owner_rolls_back_batch(self, test_async_db, generator) -> None:
        missing_id = uuid.uuid4()

        with pytest.raises(PersistenceError) as exc_info:
            await generator.ingest(test_async_db, "A. B. C", MessageOwner(message_id=missing_id))

        assert exc_info.value.details["record_count"] == 3
        assert exc_info.value.details["owner_id"] == str(missing_id)
        assert await embedding_crud.count(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_commit_failure_rolls_back_batch(
        self, test_async_db, message, generator, monkeypatch
    ) -> None:
        message_id = message.id
        monkeypatch.setattr(
            test_async_db, "commit", AsyncMock(side_effect=SQLAlchemyError("commit failed"))
        )

        with pytest.raises(PersistenceError):
            await generator.ingest(test_async_db, "A. B", MessageOwner(message_id=message_id))

        assert await embedding_crud.count_by_message(test_async_db, message_id) == 0

    @pytest.mark.asyncio
    async def test_row_without_owner_violates_check(self, test_async_db, unit_vector) -> None:
        test_async_db.add(EmbeddingModel(embedding=unit_vector(0), content="orphan"))

        with pytest.raises(IntegrityError):
            await test_async_db.flush()


    @pytest.mark.asyncio
    async def test_per_call_timeout_writes_nothing(
        self, test_async_db, message, mock_embeddings
    ) -> None:
        message_id = message.id

        async def slow(texts):
            await asyncio.sleep(1)

        mock_embeddings.aembed_documents.side_effect = slow
        generator = EmbeddingGenerator(embeddings=mock_embeddings, timeout_seconds=30.0)

        with pytest.raises(EmbeddingServiceError, match="timed out"):
            await generator.ingest(
                test_async_db, "A. B", MessageOwner(message_id=message_id), timeout_seconds=0.01
            )

        assert await embedding_crud.count_by_message(test_async_db, message_id) == 0


class TestEmbedQuery:
    """EmbeddingGenerator.embed_query() behaviour."""

    @pytest.mark.asyncio
    async def test_returns_vector(self, mock_embeddings, unit_vector) -> None:
        mock_embeddings.aembed_query.return_value = unit_vector(3)
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        assert await generator.embed_query("find me") == unit_vector(3)

    @pytest.mark.asyncio
    async def test_wrong_dimension_raises(self, mock_embeddings) -> None:
        mock_embeddings.aembed_query.return_value = [1.0, 0.0]
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        with pytest.raises(EmbeddingServiceError):
            await generator.embed_query("find me")

    @pytest.mark.asyncio
    async def test_client_exception_is_wrapped(self, mock_embeddings) -> None:
        mock_embeddings.aembed_query.side_effect = ConnectionError("down")
        generator = EmbeddingGenerator(embeddings=mock_embeddings)

        with pytest.raises(EmbeddingServiceError) as exc_info:
            await generator.embed_query("find me")

        assert exc_info.value.details["fragments"] == ["find me"]

    @pytest.mark.asyncio
    async def test_per_call_timeout(self, mock_embeddings, unit_vector) -> None:
        async def slow(query):
            await asyncio.sleep(1)
            return unit_vector(0)

        mock_embeddings.aembed_query.side_effect = slow
        generator = EmbeddingGenerator(embeddings=mock_embeddings, timeout_seconds=30.0)

        with pytest.raises(EmbeddingServiceError, match="timed out"):
            await generator.embed_query("find me", timeout_seconds=0.01)
