"""사건 API 테스트 — CRUD, 필터, 통계, 상세, 테넌트 격리.

Case API tests — CRUD, list filters, statistics, detail with associations
and tenant isolation.
"""

import uuid

from httpx import AsyncClient

from lexiflow.services.case_service import case_service
from tests.conftest import auth_header

URL = "/api/v1/cases"


async def _create(client: AsyncClient, token: str, **fields) -> dict:
    body = {"title": "Matter", "client_name": "Client Co"}
    body.update(fields)
    res = await client.post(URL, json=body, headers=auth_header(token))
    assert res.status_code == 201, res.text
    return res.json()


class TestCaseCreate:
    """사건 생성 테스트."""

    async def test_create_then_fetch(self, client: AsyncClient, associate_token, associate_user):
        """생성 후 조회 시 동일한 필드."""
        created = await _create(
            client, associate_token,
            title="Smith v. Jones",
            client_name="Smith Holdings",
            status="Trial",
            filing_date="2024-03-15",
            value=250000.5,
            matter_type="Litigation",
            docket_number="CV-24-0042",
        )
        assert created["created_by"] == str(associate_user.id)
        assert created["organization_id"] == str(associate_user.organization_id)

        res = await client.get(f"{URL}/{created['id']}", headers=auth_header(associate_token))
        assert res.status_code == 200
        fetched = res.json()
        for key in ("title", "client_name", "status", "filing_date", "value", "matter_type", "docket_number"):
            assert fetched[key] == created[key]
        assert fetched["value"] == 250000.5

    async def test_create_default_status(self, client: AsyncClient, associate_token):
        created = await _create(client, associate_token)
        assert created["status"] == "Discovery"

    async def test_create_invalid_status(self, client: AsyncClient, associate_token):
        """허용되지 않은 상태값은 400."""
        res = await client.post(URL, json={
            "title": "Bad", "client_name": "X", "status": "Pending",
        }, headers=auth_header(associate_token))
        assert res.status_code == 400

    async def test_create_with_client_reference(self, client: AsyncClient, associate_token):
        c = await client.post("/api/v1/clients", json={"name": "Initech"}, headers=auth_header(associate_token))
        created = await _create(client, associate_token, client_id=c.json()["id"], client_name="Initech")
        assert created["client_id"] == c.json()["id"]

    async def test_create_with_foreign_client_rejected(
        self, client: AsyncClient, associate_token, other_token,
    ):
        """다른 조직의 의뢰인을 참조하면 400."""
        c = await client.post("/api/v1/clients", json={"name": "Rival Client"}, headers=auth_header(other_token))
        res = await client.post(URL, json={
            "title": "X", "client_name": "Y", "client_id": c.json()["id"],
        }, headers=auth_header(associate_token))
        assert res.status_code == 400

    async def test_create_requires_auth(self, client: AsyncClient):
        res = await client.post(URL, json={"title": "X", "client_name": "Y"})
        assert res.status_code in (401, 403)


class TestCaseRead:
    """사건 조회/필터 테스트."""

    async def test_list_filter_by_status(self, client: AsyncClient, associate_token):
        """상태 필터는 일치하는 사건만 반환."""
        await _create(client, associate_token, title="A", status="Discovery")
        await _create(client, associate_token, title="B", status="Trial")
        await _create(client, associate_token, title="C", status="Trial")

        res = await client.get(URL, params={"status": "Trial"}, headers=auth_header(associate_token))
        assert res.status_code == 200
        body = res.json()
        assert body["pagination"]["total"] == 2
        assert {c["title"] for c in body["data"]} == {"B", "C"}
        assert all(c["status"] == "Trial" for c in body["data"])

    async def test_list_filter_by_matter_type(self, client: AsyncClient, associate_token):
        await _create(client, associate_token, title="IP case", matter_type="IP")
        await _create(client, associate_token, title="Lit case", matter_type="Litigation")
        res = await client.get(URL, params={"matter_type": "IP"}, headers=auth_header(associate_token))
        assert [c["title"] for c in res.json()["data"]] == ["IP case"]

    async def test_get_nonexistent(self, client: AsyncClient, associate_token):
        res = await client.get(f"{URL}/{uuid.uuid4()}", headers=auth_header(associate_token))
        assert res.status_code == 404

    async def test_get_invalid_uuid(self, client: AsyncClient, associate_token):
        res = await client.get(f"{URL}/not-a-uuid", headers=auth_header(associate_token))
        assert res.status_code == 400

    async def test_find_all_service(self, client: AsyncClient, db, associate_token, associate_user):
        """서비스 find_all — 조직 범위 + 동등 필터."""
        await _create(client, associate_token, title="One", status="Settled")
        await _create(client, associate_token, title="Two", status="Closed")

        rows = await case_service.find_all(db, associate_user.organization_id, {"status": "Settled"})
        assert [r.title for r in rows] == ["One"]


class TestCaseStats:
    """사건 통계 테스트."""

    async def test_stats(self, client: AsyncClient, associate_token):
        await _create(client, associate_token, status="Discovery")
        await _create(client, associate_token, status="Discovery")
        await _create(client, associate_token, status="Appeal")

        res = await client.get(f"{URL}/stats", headers=auth_header(associate_token))
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 3
        assert data["by_status"]["Discovery"] == 2
        assert data["by_status"]["Appeal"] == 1
        assert data["by_status"]["Settled"] == 0

    async def test_stats_empty(self, client: AsyncClient, associate_token):
        res = await client.get(f"{URL}/stats", headers=auth_header(associate_token))
        assert res.json()["total"] == 0


class TestCaseDetail:
    """사건 상세 — 연관 레코드 포함."""

    async def test_detail_includes_associations(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        case_id = case["id"]

        # 상세를 먼저 조회하여 빈 컬렉션을 세션에 적재
        empty = await client.get(f"{URL}/{case_id}", headers=headers)
        assert empty.json()["documents"] == []

        await client.post("/api/v1/documents", json={"case_id": case_id, "title": "Complaint"}, headers=headers)
        await client.post("/api/v1/tasks", json={"case_id": case_id, "title": "File answer"}, headers=headers)
        await client.post("/api/v1/time-entries", json={
            "case_id": case_id, "entry_date": "2024-05-01", "duration": 60,
            "description": "Drafted complaint", "rate": 300,
        }, headers=headers)
        await client.post("/api/v1/discovery-requests", json={
            "case_id": case_id, "request_type": "Interrogatory",
            "propounding_party": "Plaintiff", "responding_party": "Defendant",
            "title": "First set of interrogatories",
        }, headers=headers)

        res = await client.get(f"{URL}/{case_id}", headers=headers)
        assert res.status_code == 200
        data = res.json()
        assert [d["title"] for d in data["documents"]] == ["Complaint"]
        assert [t["title"] for t in data["tasks"]] == ["File answer"]
        assert len(data["time_entries"]) == 1
        assert len(data["discovery_requests"]) == 1


class TestCaseUpdateDelete:
    """사건 수정/삭제 테스트."""

    async def test_partial_update(self, client: AsyncClient, associate_token, case):
        res = await client.patch(f"{URL}/{case['id']}", json={"status": "Settled"}, headers=auth_header(associate_token))
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "Settled"
        assert data["title"] == case["title"]

    async def test_update_null_required_field_ignored(self, client: AsyncClient, associate_token, case):
        """필수 컬럼에 대한 null은 무시."""
        res = await client.patch(f"{URL}/{case['id']}", json={"title": None, "judge": "Hon. Kim"}, headers=auth_header(associate_token))
        assert res.status_code == 200
        assert res.json()["title"] == case["title"]
        assert res.json()["judge"] == "Hon. Kim"

    async def test_update_nonexistent(self, client: AsyncClient, associate_token):
        res = await client.patch(f"{URL}/{uuid.uuid4()}", json={"status": "Closed"}, headers=auth_header(associate_token))
        assert res.status_code == 404

    async def test_delete(self, client: AsyncClient, associate_token, case):
        headers = auth_header(associate_token)
        doc = await client.post("/api/v1/documents", json={"case_id": case["id"], "title": "Exhibit A"}, headers=headers)

        res = await client.delete(f"{URL}/{case['id']}", headers=headers)
        assert res.status_code == 204

        assert (await client.get(f"{URL}/{case['id']}", headers=headers)).status_code == 404
        assert (await client.get(f"/api/v1/documents/{doc.json()['id']}", headers=headers)).status_code == 404

    async def test_delete_nonexistent(self, client: AsyncClient, associate_token):
        res = await client.delete(f"{URL}/{uuid.uuid4()}", headers=auth_header(associate_token))
        assert res.status_code == 404


class TestCaseTenantIsolation:
    """다른 조직의 사건은 보이지 않음."""

    async def test_other_org_cannot_read(self, client: AsyncClient, other_token, case):
        res = await client.get(f"{URL}/{case['id']}", headers=auth_header(other_token))
        assert res.status_code == 404

    async def test_other_org_cannot_update_or_delete(self, client: AsyncClient, other_token, case):
        headers = auth_header(other_token)
        assert (await client.patch(f"{URL}/{case['id']}", json={"status": "Closed"}, headers=headers)).status_code == 404
        assert (await client.delete(f"{URL}/{case['id']}", headers=headers)).status_code == 404

    async def test_other_org_list_empty(self, client: AsyncClient, other_token, case):
        res = await client.get(URL, headers=auth_header(other_token))
        assert res.json()["data"] == []
        assert res.json()["pagination"]["total"] == 0
