"""
Contract tests for the /api/sections endpoints.

Besides the shared CRUD contract, these tests pin down the delete
sequence: the section is always marked deleted first and removed second,
with no rollback of the first step when the second one fails.
"""

import pytest

from app.core.exceptions import (
    RequestedResourceNotFoundError,
    RequestedResourceHasConflictError,
)
from app.modules.hive_sections.schemas import HiveSection, HiveSectionListItem, UpdateHiveSectionRequest


VALID_SECTION = {"name": "Shelf A", "code": "SA001", "storeHiveId": 3}


def make_section(section_id=11, **overrides):
    data = dict(id=section_id, name="Shelf A", code="SA001", is_deleted=False, store_hive_id=3)
    data.update(overrides)
    return HiveSection(**data)


class TestGetHiveSections:
    """GET /api/sections and GET /api/sections/{id}"""

    def test_list_returns_all_sections(self, contract_client, hive_section_service):
        hive_section_service.get_hive_sections.return_value = [
            HiveSectionListItem(id=1, name="Shelf A", code="SA001", is_deleted=False),
            HiveSectionListItem(id=2, name="Shelf B", code="SB001", is_deleted=True),
        ]

        response = contract_client.get("/api/sections")

        assert response.status_code == 200
        assert [item["code"] for item in response.json()] == ["SA001", "SB001"]
        hive_section_service.get_hive_sections.assert_awaited_once_with()

    def test_get_returns_section(self, contract_client, hive_section_service):
        hive_section_service.get_hive_section.return_value = make_section(11)

        response = contract_client.get("/api/sections/11")

        assert response.status_code == 200
        assert response.json()["storeHiveId"] == 3
        hive_section_service.get_hive_section.assert_awaited_once_with(11)

    def test_get_missing_returns_404(self, contract_client, hive_section_service):
        hive_section_service.get_hive_section.side_effect = RequestedResourceNotFoundError()

        assert contract_client.get("/api/sections/11").status_code == 404

    @pytest.mark.parametrize("bad_id", ["0", "x"])
    def test_get_invalid_id_never_reaches_service(self, contract_client, hive_section_service, bad_id):
        assert contract_client.get(f"/api/sections/{bad_id}").status_code == 404
        hive_section_service.get_hive_section.assert_not_awaited()


class TestAddHiveSection:
    """POST /api/sections"""

    def test_created_with_location_header(self, contract_client, hive_section_service):
        hive_section_service.create_hive_section.return_value = make_section(15)

        response = contract_client.post("/api/sections", json=VALID_SECTION)

        assert response.status_code == 201
        assert response.headers["location"] == "/api/sections/15"
        assert response.json()["id"] == 15

        create_request = hive_section_service.create_hive_section.await_args.args[0]
        assert isinstance(create_request, UpdateHiveSectionRequest)
        assert create_request.store_hive_id == 3

    def test_accepts_snake_case_fields(self, contract_client, hive_section_service):
        hive_section_service.create_hive_section.return_value = make_section(16)

        response = contract_client.post(
            "/api/sections",
            json={"name": "Shelf A", "code": "SA001", "store_hive_id": 3},
        )

        assert response.status_code == 201

    def test_missing_hive_reference_returns_400(self, contract_client, hive_section_service):
        response = contract_client.post("/api/sections", json={"name": "Shelf A", "code": "SA001"})

        assert response.status_code == 400
        assert any(error["loc"] == ["body", "storeHiveId"] for error in response.json()["errors"])
        hive_section_service.create_hive_section.assert_not_awaited()

    def test_padded_short_name_returns_400(self, contract_client, hive_section_service):
        response = contract_client.post("/api/sections", json={**VALID_SECTION, "name": "  ab  "})

        assert response.status_code == 400
        hive_section_service.create_hive_section.assert_not_awaited()

    def test_conflict_returns_409(self, contract_client, hive_section_service):
        hive_section_service.create_hive_section.side_effect = RequestedResourceHasConflictError()

        assert contract_client.post("/api/sections", json=VALID_SECTION).status_code == 409


class TestUpdateHiveSection:
    """PUT /api/sections/{id}"""

    def test_success_returns_204(self, contract_client, hive_section_service):
        response = contract_client.put("/api/sections/11", json=VALID_SECTION)

        assert response.status_code == 204
        assert hive_section_service.update_hive_section.await_args.args[0] == 11

    def test_invalid_body_returns_400(self, contract_client, hive_section_service):
        response = contract_client.put("/api/sections/11", json={**VALID_SECTION, "storeHiveId": 0})

        assert response.status_code == 400
        hive_section_service.update_hive_section.assert_not_awaited()

    def test_missing_returns_404(self, contract_client, hive_section_service):
        hive_section_service.update_hive_section.side_effect = RequestedResourceNotFoundError()

        assert contract_client.put("/api/sections/11", json=VALID_SECTION).status_code == 404


class TestSetHiveSectionStatus:
    """PUT /api/sections/{id}/status/{deletedStatus}"""

    def test_status_forwarded_to_service(self, contract_client, hive_section_service):
        response = contract_client.put("/api/sections/11/status/false")

        assert response.status_code == 204
        hive_section_service.set_status.assert_awaited_once_with(11, False)

    @pytest.mark.parametrize("segment", ["yes", "1", "off"])
    def test_non_boolean_status_rejected(self, contract_client, hive_section_service, segment):
        assert contract_client.put(f"/api/sections/11/status/{segment}").status_code == 404
        hive_section_service.set_status.assert_not_awaited()

    def test_missing_returns_404(self, contract_client, hive_section_service):
        hive_section_service.set_status.side_effect = RequestedResourceNotFoundError()

        assert contract_client.put("/api/sections/11/status/true").status_code == 404


class TestDeleteHiveSection:
    """DELETE /api/sections/{id}"""

    @pytest.fixture
    def call_log(self, hive_section_service):
        calls = []
        hive_section_service.set_status.side_effect = lambda *args: calls.append(("set_status",) + args)
        hive_section_service.delete_hive_section.side_effect = lambda *args: calls.append(("delete",) + args)
        return calls

    def test_marks_deleted_then_deletes(self, contract_client, call_log):
        response = contract_client.delete("/api/sections/11")

        assert response.status_code == 204
        assert call_log == [("set_status", 11, True), ("delete", 11)]

    def test_sequence_does_not_depend_on_prior_status(self, contract_client, call_log):
        contract_client.put("/api/sections/11/status/true")
        call_log.clear()

        contract_client.delete("/api/sections/11")

        assert call_log == [("set_status", 11, True), ("delete", 11)]

    def test_missing_section_stops_before_delete(self, contract_client, hive_section_service):
        hive_section_service.set_status.side_effect = RequestedResourceNotFoundError()

        response = contract_client.delete("/api/sections/11")

        assert response.status_code == 404
        hive_section_service.delete_hive_section.assert_not_awaited()

    def test_failed_delete_surfaces_second_error(self, contract_client, hive_section_service):
        hive_section_service.delete_hive_section.side_effect = RequestedResourceHasConflictError("in use")

        response = contract_client.delete("/api/sections/11")

        assert response.status_code == 409
        hive_section_service.set_status.assert_awaited_once_with(11, True)

    def test_invalid_id_never_reaches_service(self, contract_client, hive_section_service):
        assert contract_client.delete("/api/sections/-3").status_code == 404
        hive_section_service.set_status.assert_not_awaited()
        hive_section_service.delete_hive_section.assert_not_awaited()
