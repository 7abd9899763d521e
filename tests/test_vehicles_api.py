"""
HTTP tests for /api/vehicles, including ownership scoping and cascade delete.
"""

from datetime import datetime

from carlog.models import FuelLog, Reminder, ServiceLog


class TestVehicleCrud:
    def test_create_and_get(self, client, register, vehicle_factory):
        owner = register()
        vehicle = vehicle_factory(owner["headers"])
        assert vehicle["userId"] == owner["user"]["id"]
        assert vehicle["vehicleModel"] == "Octavia"

        res = client.get(f"/api/vehicles/{vehicle['id']}", headers=owner["headers"])
        assert res.status_code == 200
        assert res.json()["data"]["vehicle"] == vehicle

    def test_list_only_own_vehicles(self, client, register, vehicle_factory):
        alice = register("alice@carlog.io")
        bob = register("bob@carlog.io")
        vehicle_factory(alice["headers"], name="Alice car")
        vehicle_factory(bob["headers"], name="Bob car")

        res = client.get("/api/vehicles", headers=alice["headers"])
        body = res.json()
        assert body["count"] == 1
        assert [v["name"] for v in body["data"]["vehicles"]] == ["Alice car"]

    def test_partial_update(self, client, register, vehicle_factory):
        owner = register()
        vehicle = vehicle_factory(owner["headers"])

        res = client.put(f"/api/vehicles/{vehicle['id']}", json={"mileage": 130500}, headers=owner["headers"])
        assert res.status_code == 200
        updated = res.json()["data"]["vehicle"]
        assert updated["mileage"] == 130500
        assert updated["name"] == vehicle["name"]
        assert updated["make"] == vehicle["make"]
        assert updated["year"] == vehicle["year"]

    def test_update_rejects_null_for_required_field(self, client, register, vehicle_factory):
        owner = register()
        vehicle = vehicle_factory(owner["headers"])
        res = client.put(f"/api/vehicles/{vehicle['id']}", json={"name": None}, headers=owner["headers"])
        assert res.status_code == 400

    def test_optional_field_can_be_cleared(self, client, register, vehicle_factory):
        owner = register()
        vehicle = vehicle_factory(owner["headers"])
        res = client.put(f"/api/vehicles/{vehicle['id']}", json={"mileage": None}, headers=owner["headers"])
        assert res.status_code == 200
        assert res.json()["data"]["vehicle"]["mileage"] is None

    def test_invalid_year(self, client, register):
        headers = register()["headers"]
        for year in (1899, datetime.utcnow().year + 2):
            res = client.post(
                "/api/vehicles",
                json={"name": "Old", "make": "Ford", "vehicleModel": "T", "year": year},
                headers=headers,
            )
            assert res.status_code == 400

    def test_oversized_mileage_rejected(self, client, register, vehicle_factory):
        headers = register()["headers"]
        res = client.post(
            "/api/vehicles",
            json={"name": "Tanker", "make": "Volvo", "vehicleModel": "FH", "year": 2020, "mileage": 10**20},
            headers=headers,
        )
        assert res.status_code == 400
        assert res.json()["message"].startswith("Validation error")

        vehicle = vehicle_factory(headers)
        res = client.put(f"/api/vehicles/{vehicle['id']}", json={"mileage": 2**31}, headers=headers)
        assert res.status_code == 400

    def test_timestamps_are_utc(self, client, register, vehicle_factory):
        vehicle = vehicle_factory(register()["headers"])
        assert vehicle["createdAt"].endswith("Z")
        assert vehicle["updatedAt"].endswith("Z")

    def test_missing_fields(self, client, register):
        res = client.post("/api/vehicles", json={"name": "Nameless"}, headers=register()["headers"])
        assert res.status_code == 400

    def test_requires_authentication(self, client):
        assert client.get("/api/vehicles").status_code == 401


class TestVehicleOwnership:
    def test_other_users_vehicle_is_not_found(self, client, register, vehicle_factory):
        alice = register("alice@carlog.io")
        bob = register("bob@carlog.io")
        vehicle = vehicle_factory(alice["headers"])
        url = f"/api/vehicles/{vehicle['id']}"

        for res in (
            client.get(url, headers=bob["headers"]),
            client.put(url, json={"name": "Mine now"}, headers=bob["headers"]),
            client.delete(url, headers=bob["headers"]),
        ):
            assert res.status_code == 404
            assert res.json() == {"success": False, "message": "Vehicle not found"}

        # Indistinguishable from a vehicle that does not exist
        missing = client.get("/api/vehicles/does-not-exist", headers=bob["headers"])
        assert missing.json() == {"success": False, "message": "Vehicle not found"}

        assert client.get(url, headers=alice["headers"]).json()["data"]["vehicle"]["name"] == "Daily"


class TestVehicleDelete:
    def test_delete(self, client, register, vehicle_factory):
        owner = register()
        vehicle = vehicle_factory(owner["headers"])
        res = client.delete(f"/api/vehicles/{vehicle['id']}", headers=owner["headers"])
        assert res.status_code == 200
        assert client.get(f"/api/vehicles/{vehicle['id']}", headers=owner["headers"]).status_code == 404

    def test_delete_cascades_to_records(self, client, db, register, vehicle_factory):
        owner = register()
        headers = owner["headers"]
        vehicle = vehicle_factory(headers)
        vid = vehicle["id"]
        client.post(f"/api/fuel-logs/{vid}", json={"mileage": 1, "fuelAmount": 40, "totalCost": 60}, headers=headers)
        client.post(f"/api/service-logs/{vid}", json={"mileage": 1, "serviceType": "Oil"}, headers=headers)
        client.post(f"/api/reminders/{vid}", json={"title": "Tyres", "type": "mileage", "dueMileage": 5}, headers=headers)

        assert client.delete(f"/api/vehicles/{vid}", headers=headers).status_code == 200

        assert db.query(FuelLog).filter(FuelLog.vehicle_id == vid).count() == 0
        assert db.query(ServiceLog).filter(ServiceLog.vehicle_id == vid).count() == 0
        assert db.query(Reminder).filter(Reminder.vehicle_id == vid).count() == 0
