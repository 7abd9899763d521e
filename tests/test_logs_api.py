"""
HTTP tests for fuel logs and service logs.
"""

import pytest


@pytest.fixture
def owner(register):
    return register("owner@carlog.io")


@pytest.fixture
def vehicle(owner, vehicle_factory):
    return vehicle_factory(owner["headers"])


class TestFuelLogs:
    def test_create_defaults_date(self, client, owner, vehicle):
        res = client.post(
            f"/api/fuel-logs/{vehicle['id']}",
            json={"mileage": 120500, "fuelAmount": 42.5, "totalCost": 71.3},
            headers=owner["headers"],
        )
        assert res.status_code == 201
        fuel_log = res.json()["data"]["fuelLog"]
        assert fuel_log["vehicleId"] == vehicle["id"]
        assert fuel_log["fuelAmount"] == 42.5
        assert fuel_log["date"]
        assert fuel_log["notes"] is None

    def test_list_newest_first(self, client, owner, vehicle):
        url = f"/api/fuel-logs/{vehicle['id']}"
        for day, mileage in (("2024-01-10", 100), ("2024-03-10", 300), ("2024-02-10", 200)):
            client.post(
                url,
                json={"date": f"{day}T08:00:00Z", "mileage": mileage, "fuelAmount": 40, "totalCost": 60},
                headers=owner["headers"],
            )

        body = client.get(url, headers=owner["headers"]).json()
        assert [f["mileage"] for f in body["data"]["fuelLogs"]] == [300, 200, 100]
        assert body["pagination"]["total"] == 3

    def test_partial_update(self, client, owner, vehicle):
        url = f"/api/fuel-logs/{vehicle['id']}"
        created = client.post(
            url, json={"mileage": 10, "fuelAmount": 30, "totalCost": 45, "notes": "full"}, headers=owner["headers"]
        ).json()["data"]["fuelLog"]

        res = client.put(f"{url}/{created['id']}", json={"totalCost": 50}, headers=owner["headers"])
        updated = res.json()["data"]["fuelLog"]
        assert updated["totalCost"] == 50
        assert updated["fuelAmount"] == 30
        assert updated["notes"] == "full"

    def test_negative_values_rejected(self, client, owner, vehicle):
        res = client.post(
            f"/api/fuel-logs/{vehicle['id']}",
            json={"mileage": -1, "fuelAmount": 30, "totalCost": 45},
            headers=owner["headers"],
        )
        assert res.status_code == 400

    def test_oversized_mileage_rejected(self, client, owner, vehicle):
        res = client.post(
            f"/api/fuel-logs/{vehicle['id']}",
            json={"mileage": 10**20, "fuelAmount": 30, "totalCost": 45},
            headers=owner["headers"],
        )
        assert res.status_code == 400

    def test_delete(self, client, owner, vehicle):
        url = f"/api/fuel-logs/{vehicle['id']}"
        created = client.post(url, json={"mileage": 1, "fuelAmount": 1, "totalCost": 1}, headers=owner["headers"])
        fuel_log_id = created.json()["data"]["fuelLog"]["id"]

        res = client.delete(f"{url}/{fuel_log_id}", headers=owner["headers"])
        assert res.json() == {"success": True, "message": "Fuel log deleted successfully"}
        res = client.get(f"{url}/{fuel_log_id}", headers=owner["headers"])
        assert res.status_code == 404
        assert res.json()["message"] == "Fuel log not found"

    def test_foreign_vehicle(self, client, register, vehicle):
        stranger = register("stranger@carlog.io")
        url = f"/api/fuel-logs/{vehicle['id']}"
        assert client.get(url, headers=stranger["headers"]).status_code == 404
        res = client.post(url, json={"mileage": 1, "fuelAmount": 1, "totalCost": 1}, headers=stranger["headers"])
        assert res.status_code == 404
        assert res.json()["message"] == "Vehicle not found"

    def test_log_of_other_vehicle_not_reachable(self, client, owner, vehicle, vehicle_factory):
        second = vehicle_factory(owner["headers"], name="Weekend")
        created = client.post(
            f"/api/fuel-logs/{vehicle['id']}",
            json={"mileage": 1, "fuelAmount": 1, "totalCost": 1},
            headers=owner["headers"],
        ).json()["data"]["fuelLog"]

        res = client.get(f"/api/fuel-logs/{second['id']}/{created['id']}", headers=owner["headers"])
        assert res.status_code == 404


class TestServiceLogs:
    def test_create_defaults_cost(self, client, owner, vehicle):
        res = client.post(
            f"/api/service-logs/{vehicle['id']}",
            json={"mileage": 121000, "serviceType": "Oil change", "mechanic": "Joe's Garage"},
            headers=owner["headers"],
        )
        assert res.status_code == 201
        service_log = res.json()["data"]["serviceLog"]
        assert service_log["totalCost"] == 0
        assert service_log["serviceType"] == "Oil change"
        assert service_log["mechanic"] == "Joe's Garage"

    def test_service_type_required(self, client, owner, vehicle):
        res = client.post(
            f"/api/service-logs/{vehicle['id']}",
            json={"mileage": 121000, "serviceType": "  "},
            headers=owner["headers"],
        )
        assert res.status_code == 400

    def test_update_and_get(self, client, owner, vehicle):
        url = f"/api/service-logs/{vehicle['id']}"
        created = client.post(
            url, json={"mileage": 5, "serviceType": "Brakes", "totalCost": 300}, headers=owner["headers"]
        ).json()["data"]["serviceLog"]

        client.put(f"{url}/{created['id']}", json={"description": "Front pads"}, headers=owner["headers"])
        fetched = client.get(f"{url}/{created['id']}", headers=owner["headers"]).json()["data"]["serviceLog"]
        assert fetched["description"] == "Front pads"
        assert fetched["serviceType"] == "Brakes"
        assert fetched["totalCost"] == 300

    def test_foreign_vehicle(self, client, register, vehicle):
        stranger = register("stranger@carlog.io")
        res = client.get(f"/api/service-logs/{vehicle['id']}", headers=stranger["headers"])
        assert res.status_code == 404
