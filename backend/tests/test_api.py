"""
API tests: routers, role gates and domain error mapping
"""
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

import main
from domain.enums import UserRole
from domain.timeutils import utcnow
from infrastructure.security.jwt_service import JwtService
from presentation.api.v1 import container
from fakes import make_booking


@pytest.fixture
def jwt_service():
    return JwtService()


@pytest.fixture
def client(job_repo, application_repo, booking_repo, rate_repo):
    overrides = {
        container.get_job_posting_repository: lambda: job_repo,
        container.get_job_application_repository: lambda: application_repo,
        container.get_booking_repository: lambda: booking_repo,
        container.get_rate_policy_repository: lambda: rate_repo,
    }
    main.app.dependency_overrides.update(overrides)
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


@pytest.fixture
def supervisor_headers(jwt_service):
    token = jwt_service.create_access_token("supervisor-1", UserRole.SUPERVISOR)
    return {"Authorization": f"Bearer {token}"}


def labor_headers(jwt_service, labor_id="labor-1"):
    token = jwt_service.create_access_token(labor_id, UserRole.LABOR)
    return {"Authorization": f"Bearer {token}"}


def job_payload(**overrides):
    payload = {
        "title": "Event setup",
        "location_name": "Pragati Maidan",
        "description": "Tents and chairs",
        "wage_type": "daily",
        "wage_amount": 480,
        "required_date": (utcnow().date() + timedelta(days=2)).isoformat(),
        "duration_hours": 8,
        "laborers_required": 1,
    }
    payload.update(overrides)
    return payload


class TestAuth:

    def test_missing_token(self, client):
        response = client.get("/api/v1/jobs")
        assert response.status_code == 401

    def test_garbage_token(self, client):
        response = client.get("/api/v1/jobs", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_labor_cannot_post_jobs(self, client, jwt_service):
        response = client.post("/api/v1/jobs", json=job_payload(), headers=labor_headers(jwt_service))
        assert response.status_code == 403

    def test_supervisor_cannot_apply(self, client, supervisor_headers):
        response = client.post(f"/api/v1/jobs/{uuid4()}/apply", headers=supervisor_headers)
        assert response.status_code == 403


class TestJobRoutes:

    def test_create_job(self, client, supervisor_headers, job_repo):
        response = client.post("/api/v1/jobs", json=job_payload(), headers=supervisor_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "open"
        assert body["is_listed"] is True
        assert body["laborers_applied"] == 0
        assert body["supervisor_id"] == "supervisor-1"
        assert len(job_repo.jobs) == 1

    def test_create_job_below_minimum_wage(self, client, supervisor_headers, job_repo):
        response = client.post("/api/v1/jobs", json=job_payload(wage_amount=400), headers=supervisor_headers)

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "wage_below_minimum"
        assert body["required_minimum"] == "480"
        assert body["shortfall"] == "80"
        assert job_repo.jobs == {}

    def test_create_job_shift_too_long(self, client, supervisor_headers):
        response = client.post("/api/v1/jobs", json=job_payload(duration_hours=14), headers=supervisor_headers)

        assert response.status_code == 422
        assert response.json()["field"] == "duration_hours"

    def test_feed_includes_wage_assessment(self, client, supervisor_headers, jwt_service):
        client.post("/api/v1/jobs", json=job_payload(wage_amount=600), headers=supervisor_headers)

        response = client.get("/api/v1/jobs", headers=labor_headers(jwt_service))

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assessment = body["jobs"][0]["wage_assessment"]
        assert assessment["is_above_minimum"] is True
        assert float(assessment["effective_hourly_rate"]) == 75.0

    def test_listing_toggle_and_delete(self, client, supervisor_headers, jwt_service):
        job_id = client.post("/api/v1/jobs", json=job_payload(), headers=supervisor_headers).json()["id"]

        hidden = client.patch(f"/api/v1/jobs/{job_id}/listing", json={"is_listed": False}, headers=supervisor_headers)
        assert hidden.status_code == 200
        assert hidden.json()["is_listed"] is False
        assert client.get("/api/v1/jobs", headers=labor_headers(jwt_service)).json()["count"] == 0

        deleted = client.delete(f"/api/v1/jobs/{job_id}", headers=supervisor_headers)
        assert deleted.status_code == 200
        assert deleted.json()["status"] == "delisted"

        mine = client.get("/api/v1/jobs/mine", headers=supervisor_headers).json()
        assert [j["id"] for j in mine] == [job_id]

    def test_other_supervisor_cannot_delete(self, client, supervisor_headers, jwt_service):
        job_id = client.post("/api/v1/jobs", json=job_payload(), headers=supervisor_headers).json()["id"]
        other = {"Authorization": f"Bearer {jwt_service.create_access_token('supervisor-2', UserRole.SUPERVISOR)}"}

        response = client.delete(f"/api/v1/jobs/{job_id}", headers=other)

        assert response.status_code == 403
        assert response.json()["code"] == "not_authorized"

    def test_unknown_job_is_404(self, client, supervisor_headers):
        response = client.delete(f"/api/v1/jobs/{uuid4()}", headers=supervisor_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"


class TestApplyRoute:

    def test_apply_fills_single_slot_job(self, client, supervisor_headers, jwt_service, booking_repo):
        job_id = client.post("/api/v1/jobs", json=job_payload(), headers=supervisor_headers).json()["id"]

        response = client.post(f"/api/v1/jobs/{job_id}/apply", headers=labor_headers(jwt_service))

        assert response.status_code == 201
        body = response.json()
        assert body["job_filled"] is True
        assert body["laborers_applied"] == 1
        assert body["weekly_hours"] == 8
        assert body["booking"]["job_title"] == "Event setup"
        assert body["message"] == "Job booked successfully! You're all set."
        assert len(booking_repo.bookings) == 1

        feed = client.get("/api/v1/jobs", headers=labor_headers(jwt_service)).json()
        assert feed["count"] == 0

    def test_second_worker_gets_job_full(self, client, supervisor_headers, jwt_service):
        job_id = client.post("/api/v1/jobs", json=job_payload(), headers=supervisor_headers).json()["id"]
        client.post(f"/api/v1/jobs/{job_id}/apply", headers=labor_headers(jwt_service, "labor-1"))

        response = client.post(f"/api/v1/jobs/{job_id}/apply", headers=labor_headers(jwt_service, "labor-2"))

        assert response.status_code == 409
        assert response.json() == {
            "code": "job_full",
            "message": "Sorry, this job has reached its maximum number of applicants.",
        }

    def test_retry_gets_already_applied(self, client, supervisor_headers, jwt_service):
        job_id = client.post(
            "/api/v1/jobs", json=job_payload(laborers_required=3), headers=supervisor_headers
        ).json()["id"]
        client.post(f"/api/v1/jobs/{job_id}/apply", headers=labor_headers(jwt_service))

        response = client.post(f"/api/v1/jobs/{job_id}/apply", headers=labor_headers(jwt_service))

        assert response.status_code == 409
        assert response.json()["code"] == "already_applied"
        assert response.json()["message"] == "You have already applied for this job!"

    def test_weekly_limit_message(self, client, supervisor_headers, jwt_service, booking_repo):
        required_date = utcnow().date() + timedelta(days=14)
        monday = required_date - timedelta(days=required_date.weekday())
        for offset in range(6):
            booking_repo.add(make_booking("labor-1", monday + timedelta(days=offset), 8))

        job_id = client.post(
            "/api/v1/jobs",
            json=job_payload(duration_hours=5, wage_amount=300, required_date=required_date.isoformat()),
            headers=supervisor_headers,
        ).json()["id"]

        response = client.post(f"/api/v1/jobs/{job_id}/apply", headers=labor_headers(jwt_service))

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "weekly_limit_exceeded"
        assert body["message"] == (
            "Health Safety Warning: This job would put you at 53 hours this week. The limit is 50 hours."
        )

    def test_supervisor_sees_applications(self, client, supervisor_headers, jwt_service):
        job_id = client.post(
            "/api/v1/jobs", json=job_payload(laborers_required=2), headers=supervisor_headers
        ).json()["id"]
        client.post(f"/api/v1/jobs/{job_id}/apply", headers=labor_headers(jwt_service))

        response = client.get(f"/api/v1/jobs/{job_id}/applications", headers=supervisor_headers)

        assert response.status_code == 200
        assert [a["labor_id"] for a in response.json()] == ["labor-1"]
        assert response.json()[0]["status"] == "confirmed"


class TestBookingRoutes:

    def test_worker_and_supervisor_views(self, client, supervisor_headers, jwt_service):
        job_id = client.post(
            "/api/v1/jobs", json=job_payload(laborers_required=2), headers=supervisor_headers
        ).json()["id"]
        client.post(f"/api/v1/jobs/{job_id}/apply", headers=labor_headers(jwt_service))

        mine = client.get("/api/v1/bookings/me", headers=labor_headers(jwt_service)).json()
        assert mine["count"] == 1

        theirs = client.get("/api/v1/bookings/supervisor", headers=supervisor_headers).json()
        assert theirs["count"] == 1
        assert theirs["bookings"][0]["labor_id"] == "labor-1"

        applications = client.get("/api/v1/applications/me", headers=labor_headers(jwt_service)).json()
        assert [a["job_id"] for a in applications] == [job_id]

    def test_weekly_summary(self, client, jwt_service, booking_repo):
        today = utcnow().date()
        monday = today - timedelta(days=today.weekday())
        booking_repo.add(make_booking("labor-1", monday, 8))
        booking_repo.add(make_booking("labor-1", monday + timedelta(days=1), 10))

        response = client.get(
            "/api/v1/bookings/me/week", params={"date": monday.isoformat()}, headers=labor_headers(jwt_service)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["week_start"] == monday.isoformat()
        assert body["hours_by_day"][:2] == [8, 10]
        assert body["total_hours"] == 18
        assert body["weekly_limit"] == 50
        assert body["remaining_hours"] == 32

    def test_cancel_booking(self, client, jwt_service, booking_repo):
        booking = booking_repo.add(make_booking("labor-1", utcnow().date(), 8))

        response = client.post(f"/api/v1/bookings/{booking.id}/cancel", headers=labor_headers(jwt_service))
        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"

        again = client.post(f"/api/v1/bookings/{booking.id}/cancel", headers=labor_headers(jwt_service))
        assert again.status_code == 409
        assert again.json()["code"] == "invalid_transition"


class TestMisc:

    def test_rates_fallback(self, client):
        response = client.get("/api/v1/rates")

        assert response.status_code == 200
        assert float(response.json()["min_wage_per_hour"]) == 60.0

    def test_health(self, client, monkeypatch):
        monkeypatch.setattr(main, "db_health_check", AsyncMock(return_value=True))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
