# tests/test_messages.py
from tests.utils import auth


async def _send(client, token, receiver_id, subject="Field trip", content="Are you joining?"):
    return await client.post(
        "/api/messages",
        json={"receiverId": receiver_id, "subject": subject, "content": content},
        headers=auth(token),
    )


async def test_send_and_inbox(client, register):
    sender, sender_token = await register("sender")
    receiver, receiver_token = await register("receiver")

    res = await _send(client, sender_token, receiver["id"], subject="First")
    assert res.status_code == 200
    msg = res.json()
    assert msg["senderId"] == sender["id"]
    assert msg["isRead"] is False
    await _send(client, sender_token, receiver["id"], subject="Second")

    inbox = (await client.get("/api/messages", headers=auth(receiver_token))).json()
    assert [m["subject"] for m in inbox] == ["Second", "First"]
    assert inbox[0]["sender"]["username"] == "sender"
    assert inbox[0]["receiver"]["username"] == "receiver"
    assert "password" not in inbox[0]["sender"]
    assert "password" not in inbox[0]["receiver"]

    outbox_owner_inbox = (await client.get("/api/messages", headers=auth(sender_token))).json()
    assert outbox_owner_inbox == []


async def test_sender_comes_from_token(client, register):
    victim, _ = await register("impersonated")
    me, token = await register("real_sender")
    receiver, _ = await register("target")

    res = await client.post(
        "/api/messages",
        json={"receiverId": receiver["id"], "subject": "s", "content": "c", "senderId": victim["id"]},
        headers=auth(token),
    )
    assert res.json()["senderId"] == me["id"]


async def test_mark_read(client, register):
    _, sender_token = await register("pinger")
    receiver, receiver_token = await register("pinged")
    msg = (await _send(client, sender_token, receiver["id"])).json()

    res = await client.put(f"/api/messages/{msg['id']}/read", headers=auth(receiver_token))
    assert res.status_code == 200
    assert res.json() == {"message": "Message marked as read"}

    inbox = (await client.get("/api/messages", headers=auth(receiver_token))).json()
    assert inbox[0]["isRead"] is True


async def test_only_receiver_marks_read(client, register):
    _, sender_token = await register("nosy_sender")
    receiver, _ = await register("quiet_receiver")
    msg = (await _send(client, sender_token, receiver["id"])).json()

    res = await client.put(f"/api/messages/{msg['id']}/read", headers=auth(sender_token))
    assert res.status_code == 403


async def test_missing_message_and_unknown_receiver(client, register):
    _, token = await register("lonely")
    res = await client.put("/api/messages/8080/read", headers=auth(token))
    assert res.status_code == 404

    res = await _send(client, token, 8080)
    assert res.status_code == 400


async def test_invalid_message_body(client, register):
    _, token = await register("terse")
    res = await client.post("/api/messages", json={"subject": "no receiver"}, headers=auth(token))
    assert res.status_code == 400


async def test_out_of_range_ids_are_validation_errors(client, register):
    _, token = await register("bigsender")
    res = await _send(client, token, 99999999999999999999)
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid input"

    res = await client.put("/api/messages/99999999999999999999/read", headers=auth(token))
    assert res.status_code == 400
