"""
Tests for direct messages.
"""


def _send(client, sender, receiver, body):
    response = client.post("/api/messages", json={
        "sender_id": sender, "receiver_id": receiver, "message_body": body
    })
    assert response.status_code == 200
    return response.json()["id"]


class TestMessages:

    def test_sent_and_received_oldest_first(self, client):
        first = _send(client, "va-demo-1", "employer-demo-1", "Hi, is the role open?")
        second = _send(client, "employer-demo-1", "va-demo-1", "Yes it is.")
        _send(client, "employer-demo-1", "admin-1", "Unrelated")

        messages = client.get("/api/messages/va-demo-1").json()
        assert [m["id"] for m in messages] == [first, second]
        assert messages[0]["sender_name"] == "Demo VA"
        assert messages[0]["receiver_name"] == "Demo Employer"
        assert messages[0]["is_flagged"] is False

        assert len(client.get("/api/messages/employer-demo-1").json()) == 3

    def test_no_messages(self, client):
        assert client.get("/api/messages/va-demo-1").json() == []

    def test_missing_body_is_422(self, client):
        response = client.post("/api/messages", json={"sender_id": "va-demo-1", "receiver_id": "admin-1"})
        assert response.status_code == 422
