"""API resource tests."""

from uuid import uuid4

from falcon.testing import TestClient

from tests.api.conftest import bearer


class TestAuthentication:
    """Credential failures are reported distinctly."""

    def test_missing_token(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles")
        assert result.status_code == 401
        assert result.json["error"] == "missing_credentials"

    def test_wrong_scheme(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers={"Authorization": "Basic abc"})
        assert result.status_code == 401
        assert result.json["error"] == "malformed_credentials"

    def test_expired_token(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers=bearer("expired"))
        assert result.status_code == 401
        assert result.json["error"] == "expired_credentials"

    def test_invalid_token(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers=bearer("garbage"))
        assert result.json["error"] == "malformed_credentials"

    def test_unknown_subject(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers=bearer("nobody"))
        assert result.status_code == 401
        assert result.json["error"] == "malformed_credentials"

    def test_disabled_account(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers=bearer("disabled-1"))
        assert result.status_code == 403
        assert result.json["error"] == "account_disabled"

    def test_health_is_public(self, client: TestClient) -> None:
        assert client.simulate_get("/v1/health").status_code == 200
        assert client.simulate_get("/v1/health/ready").json == {"status": "ready"}

    def test_unauthenticated_write_is_401_not_400(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/roles")
        assert result.status_code == 401


class TestRoles:
    def test_list_roles(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles", headers=bearer("staff-1"))
        assert result.status_code == 200
        assert [r["name"] for r in result.json["items"]] == [
            "cashier",
            "staff",
            "manager",
            "admin",
        ]

    def test_list_default_roles(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/roles", params={"default": "true"}, headers=bearer("staff-1")
        )
        assert {r["name"] for r in result.json["items"]} == {"staff", "manager", "admin"}

    def test_stats_require_manager(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles/stats", headers=bearer("staff-1"))
        assert result.status_code == 403
        assert result.json["error"] == "insufficient_role"
        assert client.simulate_get("/v1/roles/stats", headers=bearer("mgr-1")).status_code == 200

    def test_get_role_populates_permissions(self, client: TestClient, accounts) -> None:
        role = client.simulate_get("/v1/roles", headers=bearer("staff-1")).json["items"][2]
        result = client.simulate_get(f"/v1/roles/{role['id']}", headers=bearer("staff-1"))
        assert result.status_code == 200
        assert [p["full_name"] for p in result.json["permissions"]] == ["products:update"]

    def test_get_role_bad_id(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/roles/not-a-uuid", headers=bearer("staff-1"))
        assert result.status_code == 400
        assert result.json["error"] == "validation_error"

    def test_get_role_not_found(self, client: TestClient) -> None:
        result = client.simulate_get(f"/v1/roles/{uuid4()}", headers=bearer("staff-1"))
        assert result.status_code == 404
        assert result.json["error"] == "not_found"

    def test_manager_creates_role(self, client: TestClient, accounts) -> None:
        result = client.simulate_post(
            "/v1/roles",
            json={"name": "auditor", "level": 3, "color": "#112233"},
            headers=bearer("mgr-1"),
        )
        assert result.status_code == 201
        assert result.json["name"] == "auditor"
        assert result.json["created_by"] == "mgr-1"
        assert result.json["permission_ids"] == []

    def test_create_role_rejects_non_json(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/roles",
            body="{oops",
            headers={**bearer("mgr-1"), "Content-Type": "application/json"},
        )
        assert result.status_code == 400

    def test_delete_requires_admin(self, client: TestClient, accounts) -> None:
        role = client.simulate_get("/v1/roles", headers=bearer("staff-1")).json["items"][0]
        result = client.simulate_delete(f"/v1/roles/{role['id']}", headers=bearer("mgr-1"))
        assert result.status_code == 403
        result = client.simulate_delete(f"/v1/roles/{role['id']}", headers=bearer("admin-1"))
        assert result.status_code == 204

    def test_delete_default_role_conflict(self, client: TestClient) -> None:
        staff = client.simulate_get("/v1/roles", headers=bearer("staff-1")).json["items"][1]
        result = client.simulate_delete(f"/v1/roles/{staff['id']}", headers=bearer("admin-1"))
        assert result.status_code == 409
        assert result.json["error"] == "conflict"

    def test_clone_role(self, client: TestClient) -> None:
        manager = client.simulate_get("/v1/roles", headers=bearer("staff-1")).json["items"][2]
        result = client.simulate_post(
            f"/v1/roles/{manager['id']}/clone",
            json={"name": "shift lead"},
            headers=bearer("mgr-1"),
        )
        assert result.status_code == 201
        assert result.json["permission_ids"] == manager["permission_ids"]

    def test_list_roles_paged(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/roles", params={"limit": 2, "offset": 1}, headers=bearer("staff-1")
        )
        assert [r["name"] for r in result.json["items"]] == ["staff", "manager"]
        assert (result.json["limit"], result.json["offset"]) == (2, 1)

    def test_list_roles_limit_clamped(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/roles", params={"limit": 500}, headers=bearer("staff-1")
        )
        assert result.json["limit"] == 100
        assert len(result.json["items"]) == 4

    def test_list_roles_search(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/roles", params={"search": "MAN"}, headers=bearer("staff-1")
        )
        assert [r["name"] for r in result.json["items"]] == ["manager"]

    def test_update_role_rejects_string_flag(self, client: TestClient) -> None:
        cashier = client.simulate_get("/v1/roles", headers=bearer("staff-1")).json["items"][0]
        result = client.simulate_put(
            f"/v1/roles/{cashier['id']}", json={"is_active": "false"}, headers=bearer("admin-1")
        )
        assert result.status_code == 400
        assert result.json["error"] == "validation_error"

    def test_create_role_rejects_non_string_name(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/roles", json={"name": 42}, headers=bearer("mgr-1")
        )
        assert result.status_code == 400

    def test_create_role_rejects_string_default_flag(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/roles", json={"name": "auditor", "is_default": "false"}, headers=bearer("mgr-1")
        )
        assert result.status_code == 400


class TestPermissions:
    def test_create_requires_admin(self, client: TestClient) -> None:
        body = {"name": "Export Stores", "category": "stores", "resource": "stores", "action": "export"}
        result = client.simulate_post("/v1/permissions", json=body, headers=bearer("mgr-1"))
        assert result.status_code == 403
        result = client.simulate_post("/v1/permissions", json=body, headers=bearer("admin-1"))
        assert result.status_code == 201
        assert result.json["full_name"] == "stores:export"

    def test_list_filtered_by_resource(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/permissions", params={"resource": "sales"}, headers=bearer("staff-1")
        )
        assert [p["full_name"] for p in result.json["items"]] == ["sales:manage"]

    def test_unknown_category(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/permissions/category/finance", headers=bearer("staff-1")
        )
        assert result.status_code == 400

    def test_delete_permission_in_use(self, client: TestClient) -> None:
        items = client.simulate_get(
            "/v1/permissions", params={"resource": "products"}, headers=bearer("staff-1")
        ).json["items"]
        result = client.simulate_delete(
            f"/v1/permissions/{items[0]['id']}", headers=bearer("admin-1")
        )
        assert result.status_code == 409

    def test_bulk_create(self, client: TestClient) -> None:
        body = {
            "permissions": [
                {"name": "A", "category": "stores", "resource": "stores", "action": "read"},
                {"name": "B", "category": "stores", "resource": "stores", "action": "update"},
            ]
        }
        result = client.simulate_post("/v1/permissions/bulk", json=body, headers=bearer("admin-1"))
        assert result.status_code == 201
        assert len(result.json["items"]) == 2

    def test_create_rejects_non_string_name(self, client: TestClient) -> None:
        body = {"name": 42, "category": "stores", "resource": "stores", "action": "export"}
        result = client.simulate_post("/v1/permissions", json=body, headers=bearer("admin-1"))
        assert result.status_code == 400
        assert result.json["error"] == "validation_error"

    def test_bulk_create_rejects_non_string_resource(self, client: TestClient) -> None:
        body = {"permissions": [{"name": "A", "category": "stores", "resource": 7, "action": "read"}]}
        result = client.simulate_post("/v1/permissions/bulk", json=body, headers=bearer("admin-1"))
        assert result.status_code == 400

    def test_update_rejects_string_flag(self, client: TestClient) -> None:
        items = client.simulate_get(
            "/v1/permissions", params={"resource": "sales"}, headers=bearer("staff-1")
        ).json["items"]
        result = client.simulate_put(
            f"/v1/permissions/{items[0]['id']}",
            json={"is_active": "false"},
            headers=bearer("admin-1"),
        )
        assert result.status_code == 400
        assert result.json["error"] == "validation_error"


class TestUsers:
    def test_list_own_store(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users", params={"store_id": "S1"}, headers=bearer("staff-1")
        )
        assert result.status_code == 200
        assert [u["id"] for u in result.json["items"]] == ["disabled-1", "mgr-1", "staff-1"]

    def test_list_other_store_denied(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users", params={"store_id": "S2"}, headers=bearer("staff-1")
        )
        assert result.status_code == 403
        assert result.json["error"] == "scope_violation"

    def test_admin_lists_any_store(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users", params={"store_id": "S2"}, headers=bearer("admin-1")
        )
        assert [u["id"] for u in result.json["items"]] == ["staff-2"]

    def test_staff_cannot_delete_others(self, client: TestClient) -> None:
        result = client.simulate_delete("/v1/users/staff-2", headers=bearer("staff-1"))
        assert result.status_code == 403
        assert result.json["error"] == "insufficient_role"

    def test_user_deletes_self(self, client: TestClient, accounts) -> None:
        result = client.simulate_delete("/v1/users/staff-1", headers=bearer("staff-1"))
        assert result.status_code == 204

    def test_last_admin_cannot_be_deleted(self, client: TestClient) -> None:
        result = client.simulate_delete("/v1/users/admin-1", headers=bearer("admin-1"))
        assert result.status_code == 403
        assert result.json["error"] == "last_admin_protected"

    def test_last_admin_cannot_be_deactivated(self, client: TestClient) -> None:
        result = client.simulate_patch(
            "/v1/users/admin-1/toggle-status", headers=bearer("admin-1")
        )
        assert result.json["error"] == "last_admin_protected"

    def test_bulk_update_requires_manager(self, client: TestClient) -> None:
        body = {"user_ids": ["staff-1"], "updates": {"is_active": False}}
        result = client.simulate_patch("/v1/users/bulk-update", json=body, headers=bearer("staff-1"))
        assert result.status_code == 403
        assert result.json["error"] == "insufficient_role"

    def test_bulk_update_scoped_to_store(self, client: TestClient) -> None:
        body = {"user_ids": ["staff-2"], "updates": {"is_active": False}, "store_id": "S2"}
        result = client.simulate_patch("/v1/users/bulk-update", json=body, headers=bearer("mgr-1"))
        assert result.json["error"] == "scope_violation"

    def test_bulk_update(self, client: TestClient, accounts) -> None:
        body = {"user_ids": ["staff-1"], "updates": {"store_id": "S3"}, "store_id": "S1"}
        result = client.simulate_patch("/v1/users/bulk-update", json=body, headers=bearer("mgr-1"))
        assert result.status_code == 200
        assert result.json == {"modified_count": 1}

    def test_manager_creates_user(self, client: TestClient) -> None:
        body = {"id": "kc-9", "name": "New", "email": "new@example.com", "role": "staff"}
        result = client.simulate_post("/v1/users", json=body, headers=bearer("mgr-1"))
        assert result.status_code == 201
        assert result.json["role"] == "staff"

    def test_stats(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/users/stats", headers=bearer("mgr-1"))
        assert result.json["total_users"] == 5
        assert result.json["inactive_users"] == 1

    def test_list_paged(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users", params={"limit": 2, "offset": 1}, headers=bearer("admin-1")
        )
        assert [u["id"] for u in result.json["items"]] == ["disabled-1", "mgr-1"]
        assert (result.json["limit"], result.json["offset"]) == (2, 1)

    def test_list_limit_defaults_when_zero(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users", params={"limit": 0}, headers=bearer("admin-1")
        )
        assert result.json["limit"] == 20
        assert len(result.json["items"]) == 5

    def test_list_search(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users", params={"search": "STAFF"}, headers=bearer("admin-1")
        )
        assert [u["id"] for u in result.json["items"]] == ["staff-1", "staff-2"]

    def test_search_active_only(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users/search", params={"q": "-1"}, headers=bearer("admin-1")
        )
        assert result.status_code == 200
        assert [u["id"] for u in result.json["items"]] == ["admin-1", "mgr-1", "staff-1"]

    def test_search_within_store(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users/search", params={"q": "st", "store_id": "S1"}, headers=bearer("mgr-1")
        )
        assert [u["id"] for u in result.json["items"]] == ["staff-1"]

    def test_search_query_too_short(self, client: TestClient) -> None:
        result = client.simulate_get(
            "/v1/users/search", params={"q": " a "}, headers=bearer("admin-1")
        )
        assert result.status_code == 400
        assert result.json["error"] == "validation_error"

    def test_bulk_update_rejects_string_flag(self, client: TestClient) -> None:
        body = {"user_ids": ["admin-1"], "updates": {"is_active": "false"}}
        result = client.simulate_patch("/v1/users/bulk-update", json=body, headers=bearer("admin-1"))
        assert result.status_code == 400
        admin = client.simulate_get("/v1/users/admin-1", headers=bearer("admin-1")).json
        assert admin["is_active"] is True

    def test_create_user_rejects_string_flag(self, client: TestClient) -> None:
        body = {"id": "kc-9", "name": "New", "email": "new@example.com", "is_active": "yes"}
        result = client.simulate_post("/v1/users", json=body, headers=bearer("mgr-1"))
        assert result.status_code == 400


class TestMePermissions:
    def test_manager_permissions(self, client: TestClient) -> None:
        result = client.simulate_get("/v1/me/permissions", headers=bearer("mgr-1"))
        assert result.status_code == 200
        assert result.json["permissions"] == ["products:update"]
        assert result.json["store_id"] == "S1"


class TestAuthorize:
    def test_method_derived_allow(self, client: TestClient, audit_sink) -> None:
        result = client.simulate_post(
            "/v1/authorize",
            json={"resource": "products", "method": "PUT"},
            headers=bearer("mgr-1"),
        )
        assert result.json == {"allowed": True}
        assert audit_sink.records[-1] == ("mgr-1", "products:<method>")

    def test_method_derived_deny(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/authorize",
            json={"resource": "products", "method": "DELETE"},
            headers=bearer("mgr-1"),
        )
        assert result.status_code == 200
        assert result.json["allowed"] is False
        assert result.json["error"] == "permission_denied"

    def test_unmapped_method_is_bad_request(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/authorize",
            json={"resource": "products", "method": "OPTIONS"},
            headers=bearer("admin-1"),
        )
        assert result.status_code == 400
        assert result.json["error"] == "invalid_method"

    def test_exact_action(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/authorize",
            json={"resource": "sales", "action": "manage"},
            headers=bearer("staff-1"),
        )
        assert result.json["allowed"] is False

    def test_store_scope(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/authorize",
            json={"resource": "products", "method": "PUT", "store_id": "S2"},
            headers=bearer("mgr-1"),
        )
        assert result.json["error"] == "scope_violation"

    def test_action_and_method_are_exclusive(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/authorize",
            json={"resource": "products", "method": "GET", "action": "read"},
            headers=bearer("mgr-1"),
        )
        assert result.status_code == 400

    def test_non_string_resource_is_bad_request(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/authorize",
            json={"resource": 5, "method": "GET"},
            headers=bearer("mgr-1"),
        )
        assert result.status_code == 400
        assert result.json["error"] == "validation_error"

    def test_non_string_method_is_bad_request(self, client: TestClient) -> None:
        result = client.simulate_post(
            "/v1/authorize",
            json={"resource": "products", "method": ["GET"]},
            headers=bearer("mgr-1"),
        )
        assert result.status_code == 400

