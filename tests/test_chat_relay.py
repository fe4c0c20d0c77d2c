"""
Chat relay: registry, frame handling and WebSocket broadcast
"""
import asyncio
import json

import pytest
from starlette.websockets import WebSocketDisconnect

from laborconnect.core.security import create_access_token
from laborconnect.schemas.chat import ChatBroadcast, ChatMessageResponse
from laborconnect.services.chat_relay import ChatIdentity, ChatRelay
from laborconnect.storage import MemoryStore

from conftest import worker_payload


class FakeWebSocket:
    def __init__(self, fail=False):
        self.fail = fail
        self.accepted = False
        self.sent = []

    async def accept(self):
        self.accepted = True

    async def send_text(self, text):
        if self.fail:
            raise RuntimeError("connection reset")
        self.sent.append(json.loads(text))


def frame(message="hello", user_id="u1", user_name="Ann"):
    return json.dumps({"type": "chat_message", "userId": user_id, "userName": user_name, "message": message})


def test_connect_and_disconnect_track_registry():
    relay = ChatRelay(MemoryStore())
    socket = FakeWebSocket()

    async def scenario():
        connection_id = await relay.connect(socket)
        assert relay.active_connections == 1
        await relay.disconnect(connection_id)
        await relay.disconnect(connection_id)

    asyncio.run(scenario())
    assert socket.accepted
    assert relay.active_connections == 0


def test_socket_is_registered_only_after_handshake():
    relay = ChatRelay(MemoryStore())
    registered_during_accept = []

    class RecordingWebSocket(FakeWebSocket):
        async def accept(self):
            registered_during_accept.append(relay.active_connections)
            await super().accept()

    class RejectedWebSocket(FakeWebSocket):
        async def accept(self):
            raise RuntimeError("handshake failed")

    async def scenario():
        await relay.connect(RecordingWebSocket())
        with pytest.raises(RuntimeError):
            await relay.connect(RejectedWebSocket())

    asyncio.run(scenario())
    assert registered_during_accept == [0]
    assert relay.active_connections == 1


def test_handle_frame_stores_and_broadcasts_to_everyone():
    store = MemoryStore()
    relay = ChatRelay(store)
    sender, listener = FakeWebSocket(), FakeWebSocket()

    async def scenario():
        await relay.connect(sender)
        await relay.connect(listener)
        return await relay.handle_frame(frame("hi all"))

    stored = asyncio.run(scenario())

    assert stored.message == "hi all"
    assert [m.id for m in store.get_chat_messages()] == [stored.id]
    assert sender.sent == listener.sent
    assert len(sender.sent) == 1
    broadcast = sender.sent[0]
    assert broadcast["type"] == "chat_message"
    assert broadcast["data"]["id"] == stored.id
    assert broadcast["data"]["userId"] == "u1"
    assert broadcast["data"]["userName"] == "Ann"
    assert broadcast["data"]["message"] == "hi all"
    assert broadcast["data"]["timestamp"]


def test_broadcast_survives_failing_client():
    relay = ChatRelay(MemoryStore())
    broken, healthy = FakeWebSocket(fail=True), FakeWebSocket()

    async def scenario():
        await relay.connect(broken)
        await relay.connect(healthy)
        message = relay.store.add_chat_message(relay.parse_frame(frame()))
        return await relay.broadcast(ChatBroadcast(data=message))

    delivered = asyncio.run(scenario())

    assert delivered == 1
    assert len(healthy.sent) == 1
    assert relay.active_connections == 2


@pytest.mark.parametrize("raw", [
    "not json",
    "[1, 2, 3]",
    json.dumps({"type": "typing", "userId": "u1", "userName": "Ann", "message": "x"}),
    json.dumps({"userId": "u1", "userName": "Ann", "message": "x"}),
    json.dumps({"type": "chat_message", "userId": "u1", "message": "x"}),
    json.dumps({"type": "chat_message", "userId": "u1", "userName": "Ann", "message": ""}),
])
def test_malformed_frames_are_ignored(raw):
    store = MemoryStore()
    relay = ChatRelay(store)
    socket = FakeWebSocket()

    async def scenario():
        await relay.connect(socket)
        return await relay.handle_frame(raw)

    assert asyncio.run(scenario()) is None
    assert socket.sent == []
    assert store.get_chat_messages() == []


def test_identity_overrides_frame_fields():
    relay = ChatRelay(MemoryStore())

    data = relay.parse_frame(frame(user_id="spoofed", user_name="Mallory"), ChatIdentity("u42", "Maria Lopez"))

    assert data.user_id == "u42"
    assert data.user_name == "Maria Lopez"


def test_websocket_broadcast_reaches_sender_and_other_client(client):
    with client.websocket_connect("/ws") as sender, client.websocket_connect("/ws") as other:
        sender.send_text("garbage")
        sender.send_text(frame("Anyone free tomorrow?"))

        received_by_sender = sender.receive_json()
        received_by_other = other.receive_json()

    assert received_by_sender == received_by_other
    assert received_by_sender["type"] == "chat_message"
    data = ChatMessageResponse.model_validate(received_by_sender["data"])
    assert data.message == "Anyone free tomorrow?"
    assert data.user_name == "Ann"
    assert data.id
    assert data.timestamp is not None

    history = client.get("/api/chat/messages").json()
    assert [m["id"] for m in history] == [data.id]


def test_websocket_token_binds_identity(client):
    user = client.post("/api/auth/register", json=worker_payload()).json()
    login = client.post(
        "/api/auth/login", json={"email": "worker@example.com", "password": "password123"}
    ).json()
    assert login["id"] == user["id"]
    token = login["accessToken"]

    with client.websocket_connect(f"/ws?token={token}") as socket:
        socket.send_text(frame(user_id="someone-else", user_name="Impostor"))
        data = socket.receive_json()["data"]

    assert data["userId"] == user["id"]
    assert data["userName"] == "Maria Lopez"


def test_websocket_rejects_invalid_token(client, settings):
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect("/ws?token=not-a-token") as socket:
            socket.receive_json()
    assert exc_info.value.code == 1008

    forged = create_access_token({"sub": "u1"}, settings=settings.model_copy(update={"JWT_SECRET_KEY": "other"}))
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect(f"/ws?token={forged}") as socket:
            socket.receive_json()
