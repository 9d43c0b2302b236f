"""
Tests for admin moderation: token checks, job transitions, users, audit log.
"""
import pytest

from tests.conftest import login


class TestAdminAuthorization:
    """Every /admin endpoint needs an admin bearer token."""

    @pytest.mark.parametrize("method,path", [
        ("GET", "/api/admin/stats"),
        ("GET", "/api/admin/pending-jobs"),
        ("GET", "/api/admin/users"),
        ("GET", "/api/admin/logs"),
        ("GET", "/api/admin/subscriptions"),
    ])
    def test_missing_token_is_401(self, client, method, path):
        assert client.request(method, path).status_code == 401

    def test_non_admin_token_is_403(self, client, va_headers):
        response = client.get("/api/admin/stats", headers=va_headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Admins only"

    def test_acting_admin_comes_from_token(self, client, admin_headers, create_pending_job):
        job_id = create_pending_job()
        client.post("/api/admin/approve-job", json={"id": job_id, "admin_id": "someone-else"},
                    headers=admin_headers)
        logs = client.get("/api/admin/logs", headers=admin_headers).json()
        assert logs[0]["admin_id"] == "admin-1"
        assert logs[0]["admin_name"] == "System Admin"

    def test_suspended_admin_is_locked_out(self, client, admin_headers):
        client.post("/api/admin/update-user-status", json={"id": "admin-1", "status": "suspended"},
                    headers=admin_headers)
        response = client.get("/api/admin/stats", headers=admin_headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Account suspended"

    def test_pending_admin_is_locked_out(self, client, database):
        database.execute_raw_sql(
            "INSERT INTO users (id, name, email, password, role, status) "
            "VALUES ('admin-2', 'New Admin', 'new-admin@x.com', 'pw', 'admin', 'pending')"
        )
        token = login(client, "new-admin@x.com", "pw")["access_token"]
        headers = {"Authorization": f"Bearer {token}"}

        response = client.get("/api/admin/stats", headers=headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Account not approved"
        response = client.request("DELETE", "/api/admin/delete-user", json={"id": "admin-1"}, headers=headers)
        assert response.status_code == 403


class TestStats:

    def test_counts_seeded_data(self, client, admin_headers, create_pending_job):
        create_pending_job()
        stats = client.get("/api/admin/stats", headers=admin_headers).json()
        assert stats == {"total_vas": 9, "total_employers": 1, "total_jobs": 23, "pending_jobs": 1}


class TestJobModeration:
    """Approve/reject only from pending."""

    def test_pending_jobs_listing(self, client, admin_headers, create_pending_job):
        first = create_pending_job("First")
        second = create_pending_job("Second")
        pending = client.get("/api/admin/pending-jobs", headers=admin_headers).json()
        assert [j["id"] for j in pending] == [second, first]
        assert pending[0]["company_name"] == "Demo Corp"

    def test_reject_stores_reason_and_logs(self, client, admin_headers, create_pending_job):
        job_id = create_pending_job()
        response = client.post("/api/admin/reject-job", json={"id": job_id, "reason": "Too vague"},
                               headers=admin_headers)
        assert response.status_code == 200

        job = client.get(f"/api/jobs/{job_id}").json()
        assert job["status"] == "rejected"
        assert job["rejection_reason"] == "Too vague"
        assert job_id not in {j["id"] for j in client.get("/api/jobs").json()}

        log = client.get("/api/admin/logs", headers=admin_headers).json()[0]
        assert log["action_type"] == "job_rejected"
        assert log["description"] == f"Rejected job: {job_id}. Reason: Too vague"

    def test_approving_non_pending_job_is_400(self, client, admin_headers):
        response = client.post("/api/admin/approve-job", json={"id": "j1"}, headers=admin_headers)
        assert response.status_code == 400
        assert client.get("/api/admin/logs", headers=admin_headers).json() == []

    def test_rejecting_rejected_job_is_400(self, client, admin_headers, create_pending_job):
        job_id = create_pending_job()
        client.post("/api/admin/reject-job", json={"id": job_id, "reason": "x"}, headers=admin_headers)
        response = client.post("/api/admin/approve-job", json={"id": job_id}, headers=admin_headers)
        assert response.status_code == 400
        assert client.get(f"/api/jobs/{job_id}").json()["status"] == "rejected"

    def test_unknown_job_is_404(self, client, admin_headers):
        for path in ("/api/admin/approve-job", "/api/admin/reject-job", "/api/admin/feature-job"):
            response = client.post(path, json={"id": "missing"}, headers=admin_headers)
            assert response.status_code == 404

    def test_feature_toggle(self, client, admin_headers):
        client.post("/api/admin/feature-job", json={"id": "j2", "is_featured": True}, headers=admin_headers)
        client.post("/api/admin/feature-job", json={"id": "j1", "is_featured": False}, headers=admin_headers)
        jobs = client.get("/api/jobs").json()
        assert {j["id"] for j in jobs[:4]} == {"j2", "j3", "j10", "j12"}

        logs = client.get("/api/admin/logs", headers=admin_headers).json()
        assert {log["action_type"] for log in logs} == {"job_featured"}
        assert len(logs) == 2


class TestUserManagement:

    def test_users_exclude_admins(self, client, admin_headers):
        users = client.get("/api/admin/users", headers=admin_headers).json()
        assert len(users) == 10
        assert all(u["role"] != "admin" for u in users)
        assert all("password" not in u for u in users)

    def test_search_is_case_insensitive(self, client, admin_headers):
        users = client.get("/api/admin/users", params={"search": "OLIVER"}, headers=admin_headers).json()
        assert [u["email"] for u in users] == ["oliver@demo.com"]

        users = client.get("/api/admin/users", params={"search": "demo.com"}, headers=admin_headers).json()
        assert len(users) == 10

    def test_update_status_logs_target(self, client, admin_headers):
        response = client.post("/api/admin/update-user-status",
                               json={"id": "va-demo-1", "status": "suspended"}, headers=admin_headers)
        assert response.status_code == 200

        users = client.get("/api/admin/users", params={"search": "va@demo.com"}, headers=admin_headers).json()
        assert users[0]["status"] == "suspended"

        log = client.get("/api/admin/logs", headers=admin_headers).json()[0]
        assert log["action_type"] == "user_status_updated"
        assert log["target_user_id"] == "va-demo-1"
        assert log["description"] == "Updated user status to suspended"

    def test_suspended_va_drops_out_of_talents(self, client, admin_headers):
        before = len(client.get("/api/talents").json())
        client.post("/api/admin/update-user-status", json={"id": "va-demo-1", "status": "suspended"},
                    headers=admin_headers)
        assert len(client.get("/api/talents").json()) == before - 1

    def test_invalid_status_is_422(self, client, admin_headers):
        response = client.post("/api/admin/update-user-status",
                               json={"id": "va-demo-1", "status": "banned"}, headers=admin_headers)
        assert response.status_code == 422

    def test_delete_user_leaves_dependent_rows(self, client, database, admin_headers):
        client.post("/api/applications", json={"job_id": "j1", "va_id": "va-demo-1"})
        client.post("/api/messages", json={
            "sender_id": "va-demo-1", "receiver_id": "employer-demo-1", "message_body": "Hello"
        })

        response = client.request("DELETE", "/api/admin/delete-user", json={"id": "va-demo-1"},
                                  headers=admin_headers)
        assert response.status_code == 200

        emails = [u["email"] for u in client.get("/api/admin/users", headers=admin_headers).json()]
        assert "va@demo.com" not in emails
        assert client.post("/api/auth/login", json={"email": "va@demo.com", "password": "vademo"}).status_code == 401

        params = {"uid": "va-demo-1"}
        assert database.execute_raw_sql("SELECT id FROM va_profiles WHERE user_id = :uid", params)
        assert database.execute_raw_sql("SELECT id FROM applications WHERE va_id = :uid", params)
        assert database.execute_raw_sql("SELECT id FROM messages WHERE sender_id = :uid", params)

        log = client.get("/api/admin/logs", headers=admin_headers).json()[0]
        assert log["action_type"] == "user_deleted"
        assert log["description"] == "Deleted user: va-demo-1"


class TestLogsAndSubscriptions:

    def test_logs_newest_first(self, client, admin_headers, create_pending_job):
        first, second = create_pending_job("A"), create_pending_job("B")
        client.post("/api/admin/approve-job", json={"id": first}, headers=admin_headers)
        client.post("/api/admin/reject-job", json={"id": second, "reason": "dup"}, headers=admin_headers)
        logs = client.get("/api/admin/logs", headers=admin_headers).json()
        assert [log["action_type"] for log in logs] == ["job_rejected", "job_approved"]

    def test_subscriptions_joined_with_employer_and_plan(self, client, admin_headers):
        client.post("/api/subscriptions/upgrade", json={"employer_id": "employer-demo-1", "plan_id": "pro-plan"})
        subs = client.get("/api/admin/subscriptions", headers=admin_headers).json()
        assert len(subs) == 1
        assert subs[0]["employer_name"] == "Demo Employer"
        assert subs[0]["employer_email"] == "emp@demo.com"
        assert subs[0]["plan_name"] == "PRO"
