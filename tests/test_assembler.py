"""Tests for link building and the PUT merge."""

from vehicles.assembler import CarResourceAssembler
from vehicles.models.car import Condition
from vehicles.routers.cars import merge_car
from vehicles.schemas.car import Car, CarUpdate, Details, Location, Manufacturer


def make_car(car_id=1):
    return Car(
        id=car_id,
        condition=Condition.USED,
        details=Details(
            body="sedan",
            model="Impala",
            manufacturer=Manufacturer(code=101, name="Chevrolet"),
            number_of_doors=4,
        ),
        location=Location(lat=40.730610, lon=-73.935242),
    )


class TestCarResourceAssembler:

    def test_resource_links(self):
        resource = CarResourceAssembler("http://vehicles.local/").to_resource(make_car(5))

        assert resource.links["self"].href == "http://vehicles.local/cars/5"
        assert resource.links["cars"].href == "http://vehicles.local/cars"
        assert resource.details.model == "Impala"

    def test_resource_serializes_hal_keys(self):
        data = CarResourceAssembler("http://h").to_resource(make_car()).model_dump(by_alias=True)

        assert data["_links"]["self"]["href"] == "http://h/cars/1"
        assert data["details"]["numberOfDoors"] == 4

    def test_collection(self):
        collection = CarResourceAssembler("http://h").to_collection([make_car(1), make_car(2)])
        data = collection.model_dump(by_alias=True)

        assert [car["id"] for car in data["_embedded"]["carList"]] == [1, 2]
        assert data["_links"]["self"]["href"] == "http://h/cars"


class TestMergeCar:

    def test_empty_update_changes_nothing(self):
        original = make_car()

        merged = merge_car(make_car(), CarUpdate())

        assert merged == original

    def test_condition(self):
        merged = merge_car(make_car(), CarUpdate(condition=Condition.NEW))

        assert merged.condition == Condition.NEW
        assert merged.details == make_car().details

    def test_details_are_merged_field_by_field(self):
        update = CarUpdate.model_validate({"details": {"model": "Malibu", "externalColor": "red"}})

        merged = merge_car(make_car(), update)

        assert merged.details.model == "Malibu"
        assert merged.details.external_color == "red"
        assert merged.details.body == "sedan"
        assert merged.details.number_of_doors == 4

    def test_manufacturer_is_replaced(self):
        update = CarUpdate.model_validate({"details": {"manufacturer": {"code": 102, "name": "Ford"}}})

        merged = merge_car(make_car(), update)

        assert merged.details.manufacturer == Manufacturer(code=102, name="Ford")

    def test_location_is_replaced(self):
        merged = merge_car(make_car(), CarUpdate(location=Location(lat=1.5, lon=2.5)))

        assert merged.location == Location(lat=1.5, lon=2.5)
