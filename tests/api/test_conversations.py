import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from uuid import uuid4
from datetime import datetime

from message_rag.api.deps import get_conversation_service
from message_rag.api.routers.conversations import router as conversations_router
from message_rag.core.exceptions import ConversationNotFoundError, ValidationError


@pytest.fixture
def app():
    app = FastAPI()
    app.include_router(conversations_router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_conversation_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_conversation_service] = lambda: service
    return service


def _conversation(user_id, title="Algebra"):
    now = datetime.now().isoformat()
    return {
        "id": str(uuid4()),
        "title": title,
        "user_id": str(user_id),
        "created_at": now,
        "updated_at": now,
    }


def test_create_conversation(client, mock_conversation_service):
    user_id = uuid4()
    mock_conversation_service.create_conversation.return_value = _conversation(user_id)

    response = client.post("/conversations", json={"user_id": str(user_id), "title": "Algebra"})

    assert response.status_code == 201
    assert response.json()["title"] == "Algebra"
    mock_conversation_service.create_conversation.assert_called_once_with(
        user_id=user_id, title="Algebra"
    )


def test_create_conversation_blank_title(client, mock_conversation_service):
    mock_conversation_service.create_conversation.side_effect = ValidationError(
        "Conversation title cannot be empty", field="title"
    )

    response = client.post("/conversations", json={"user_id": str(uuid4()), "title": "  "})

    assert response.status_code == 400
    assert response.json()["detail"] == "Conversation title cannot be empty"


def test_create_conversation_missing_user(client, mock_conversation_service):
    response = client.post("/conversations", json={"title": "x"})
    assert response.status_code == 422


def test_list_conversations(client, mock_conversation_service):
    user_id = uuid4()
    mock_conversation_service.get_conversations.return_value = [_conversation(user_id)]

    response = client.get(f"/conversations?user_id={user_id}")

    assert response.status_code == 200
    assert len(response.json()) == 1
    mock_conversation_service.get_conversations.assert_called_once_with(
        user_id=user_id, limit=100, offset=0
    )


def test_get_conversation_not_found(client, mock_conversation_service):
    conversation_id = uuid4()
    mock_conversation_service.get_conversation.side_effect = ConversationNotFoundError(
        str(conversation_id)
    )

    response = client.get(f"/conversations/{conversation_id}")

    assert response.status_code == 404


def test_delete_conversation(client, mock_conversation_service):
    conversation_id = uuid4()
    mock_conversation_service.delete_conversation.return_value = True

    response = client.delete(f"/conversations/{conversation_id}")

    assert response.status_code == 204
    mock_conversation_service.delete_conversation.assert_called_once_with(conversation_id)


def test_delete_conversation_not_found(client, mock_conversation_service):
    conversation_id = uuid4()
    mock_conversation_service.delete_conversation.side_effect = ConversationNotFoundError(
        str(conversation_id)
    )

    response = client.delete(f"/conversations/{conversation_id}")

    assert response.status_code == 404
