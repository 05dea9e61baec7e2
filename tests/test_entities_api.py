"""
HTTP tests for the entity endpoints.

Tests cover:
- Listing and filtering by search term
- Creation and its validation
- Bulk deletion and its 400/404 contract
- Editing and its 400/404 contract
"""

import pytest

from entity_api.app.core.store import Entity


class TestListEntities:
    """Tests for GET /api/entities."""

    def test_missing_search_is_rejected(self, client):
        """No search parameter yields 400."""
        response = client.get("/api/entities")

        assert response.status_code == 400
        assert response.json() == {"error": 'No se envió el parámetro "search".'}

    def test_empty_search_returns_everything(self, client, store):
        """Empty search returns the whole collection in order."""
        response = client.get("/api/entities", params={"search": ""})

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body] == [entity.id for entity in store.entities]
        assert body[0] == {"id": 1, "name": "Entity 1", "description": "Description 1"}

    def test_search_filters_by_name(self, client):
        """'Entity 1' matches entities 1 and 10."""
        response = client.get("/api/entities", params={"search": "Entity 1"})

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [1, 10]

    def test_search_is_case_insensitive(self, client):
        """Upper-case term matches lower-case names and vice versa."""
        response = client.get("/api/entities", params={"search": "eNTITY 7"})

        assert response.status_code == 200
        assert [item["name"] for item in response.json()] == ["Entity 7"]

    def test_search_is_sound_and_complete(self, client, store):
        """Every result contains the term; every matching entity is returned."""
        term = "y 1"
        response = client.get("/api/entities", params={"search": term})

        returned = {item["id"] for item in response.json()}
        expected = {entity.id for entity in store.entities if term in entity.name.lower()}
        assert returned == expected
        assert all(term in item["name"].lower() for item in response.json())

    def test_search_without_matches_returns_empty_list(self, client):
        """No match is still a success."""
        response = client.get("/api/entities", params={"search": "notMatching"})

        assert response.status_code == 200
        assert response.json() == []


class TestCreateEntity:
    """Tests for POST /api/createEntity."""

    def test_create_entity(self, client, store):
        """Created entity is returned with 201 and stored."""
        data = {"name": "TestEntity", "description": "TestDescription"}

        response = client.post("/api/createEntity", json=data)

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["name"] == "TestEntity"
        stored = store.entities.find(body["id"])
        assert stored is not None
        assert stored.description == "TestDescription"

    def test_created_entity_is_listed(self, client):
        """Round trip: create then list with empty search."""
        data = {"name": "TestEntity", "description": "TestDescription"}
        created = client.post("/api/createEntity", json=data).json()

        listed = client.get("/api/entities", params={"search": ""}).json()

        assert created in listed

    def test_id_is_count_plus_one(self, client):
        """Ten seeded entities -> next id is 11."""
        response = client.post("/api/createEntity", json={"name": "A", "description": "B"})

        assert response.json()["id"] == 11

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"name": "OnlyName"},
            {"description": "OnlyDescription"},
            {"name": "", "description": "x"},
            {"name": "x", "description": None},
            {"name": 0, "description": "x"},
            {"name": "x", "description": False},
            {"name": [], "description": "x"},
        ],
    )
    def test_missing_fields_are_rejected(self, client, store, payload):
        """Missing or empty name/description yields 400 and no insert."""
        before = len(store.entities)

        response = client.post("/api/createEntity", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Debe proporcionar name y description"}
        assert len(store.entities) == before

    def test_missing_body_is_rejected(self, client):
        """A request without a body reports the missing fields."""
        response = client.post("/api/createEntity")

        assert response.status_code == 400
        assert response.json() == {"error": "Debe proporcionar name y description"}

    def test_non_string_values_are_accepted(self, client, store):
        """Only presence is checked; truthy values of any type are stored."""
        response = client.post("/api/createEntity", json={"name": 123, "description": True})

        assert response.status_code == 201
        assert response.json() == {"id": 11, "name": 123, "description": True}
        assert store.entities.find(11).name == 123

    def test_non_string_names_are_searchable(self, client):
        """The filter compares against the name's text."""
        client.post("/api/createEntity", json={"name": 4567, "description": "x"})

        response = client.get("/api/entities", params={"search": "56"})

        assert response.status_code == 200
        assert [item["name"] for item in response.json()] == [4567]


class TestDeleteEntities:
    """Tests for DELETE /api/deleteEntities."""

    def test_delete_entities(self, small_client, two_entity_store):
        """Deleting id 1 leaves entity 2 and returns it."""
        response = small_client.request("DELETE", "/api/deleteEntities", json=[1])

        assert response.status_code == 200
        assert response.json() == [{"id": 2, "name": "Entity2", "description": "Description2"}]
        assert [entity.id for entity in two_entity_store.entities] == [2]

    def test_unknown_ids_are_ignored_when_one_matches(self, small_client, two_entity_store):
        """Partial matches still succeed."""
        response = small_client.request("DELETE", "/api/deleteEntities", json=[2, 999])

        assert response.status_code == 200
        assert [entity.id for entity in two_entity_store.entities] == [1]

    def test_no_matching_ids(self, small_client, two_entity_store):
        """[100, 200] matches nothing: 404 and collection unchanged."""
        response = small_client.request("DELETE", "/api/deleteEntities", json=[100, 200])

        assert response.status_code == 404
        assert response.json() == {
            "error": "No se encontraron entidades para eliminar con los IDs proporcionados"
        }
        assert [entity.id for entity in two_entity_store.entities] == [1, 2]

    def test_empty_id_list(self, small_client, two_entity_store):
        """Empty array: 400 and collection unchanged."""
        response = small_client.request("DELETE", "/api/deleteEntities", json=[])

        assert response.status_code == 400
        assert response.json() == {"error": "Debe proporcionar al menos un ID de entidad para eliminar"}
        assert len(two_entity_store.entities) == 2

    def test_missing_body(self, small_client):
        """No body at all is treated like an empty array."""
        response = small_client.request("DELETE", "/api/deleteEntities")

        assert response.status_code == 400
        assert response.json() == {"error": "Debe proporcionar al menos un ID de entidad para eliminar"}

    def test_non_array_body_is_invalid(self, small_client):
        """A body that is not a list of ids is a malformed request."""
        response = small_client.request("DELETE", "/api/deleteEntities", json={"ids": [1]})

        assert response.status_code == 400
        assert response.json()["error"] == "Solicitud inválida"

    def test_ids_must_be_integers(self, small_client, two_entity_store):
        """String ids are not coerced to integers."""
        response = small_client.request("DELETE", "/api/deleteEntities", json=["1"])

        assert response.status_code == 400
        assert response.json()["error"] == "Solicitud inválida"
        assert [entity.id for entity in two_entity_store.entities] == [1, 2]

    def test_ids_can_collide_after_delete(self, small_client, two_entity_store):
        """Ids come from count + 1, so a create after a delete reuses id 2."""
        small_client.request("DELETE", "/api/deleteEntities", json=[1])

        created = small_client.post("/api/createEntity", json={"name": "N", "description": "D"}).json()

        assert created["id"] == 2
        ids = [entity.id for entity in two_entity_store.entities]
        assert ids == [2, 2]


class TestEditEntity:
    """Tests for PUT /api/editEntity/{id}."""

    def test_edit_entity(self, small_client, two_entity_store):
        """Name and description are replaced; id is kept."""
        data = {"name": "UpdatedName", "description": "UpdatedDescription"}

        response = small_client.put("/api/editEntity/1", json=data)

        assert response.status_code == 200
        assert response.json() == {"id": 1, **data}
        assert two_entity_store.entities.find(1) == Entity(id=1, **data)
        assert len(two_entity_store.entities) == 2

    def test_edit_unknown_entity(self, small_client):
        """Id 100 does not exist."""
        data = {"name": "UpdatedName", "description": "UpdatedDescription"}

        response = small_client.put("/api/editEntity/100", json=data)

        assert response.status_code == 404
        assert response.json() == {"error": "Entidad no encontrada"}

    def test_edit_with_missing_fields(self, small_client, two_entity_store):
        """Empty body yields 400 and leaves the record alone."""
        response = small_client.put("/api/editEntity/1", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Debe proporcionar name y description"}
        assert two_entity_store.entities.find(1).name == "Entity1"

    def test_fields_are_checked_before_lookup(self, small_client):
        """Unknown id with missing fields reports the missing fields."""
        response = small_client.put("/api/editEntity/100", json={"name": "x"})

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": 0, "description": "x"},
            {"name": "x", "description": False},
            {"name": "", "description": "x"},
        ],
    )
    def test_falsy_fields_are_rejected(self, small_client, two_entity_store, payload):
        """Falsy values of any JSON type count as missing."""
        response = small_client.put("/api/editEntity/1", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Debe proporcionar name y description"}
        assert two_entity_store.entities.find(1).name == "Entity1"

    def test_non_integer_id_is_not_found(self, small_client):
        """An id that is not a number matches no entity."""
        response = small_client.put("/api/editEntity/abc", json={"name": "x", "description": "y"})

        assert response.status_code == 404
        assert response.json() == {"error": "Entidad no encontrada"}

    def test_non_integer_id_with_missing_fields(self, small_client):
        """Fields are still checked first for an id that is not a number."""
        response = small_client.put("/api/editEntity/abc", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Debe proporcionar name y description"}
