"""Shared fixtures: an app on in-memory SQLite seeded with drivers and cars."""
from __future__ import annotations

import pytest

from app import create_app, db
from app.models import Automovil, Conductor
from config import TestConfig

DRIVERS = [
    ("Ana", 25),
    ("Bruno", 40),
    ("Carla", 33),
    ("Diego", 19),
    ("Elena", 50),
]

CARS = [
    ("HXJH55", "Toyota", "Ana"),
    ("HXKL12", "Ford", "Bruno"),
    ("AB1C34", "Seat", "Carla"),
    ("JJZZ99", "Kia", "Pedro"),  # driver not registered
    ("AB_C12", "Fiat", None),  # no driver at all
]


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        db.session.add_all(Conductor(nombre=n, edad=e) for n, e in DRIVERS)
        db.session.add_all(
            Automovil(patente=p, marca=m, nombre_conductor=c) for p, m, c in CARS
        )
        db.session.commit()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
