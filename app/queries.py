# app/queries.py
from sqlalchemy import text

from . import db

# ---- Full listings ----
ALL_DRIVERS = text("SELECT * FROM conductores")

ALL_CARS = text("SELECT * FROM automoviles")

# ---- Outer joins ----
DRIVERS_WITHOUT_CAR = text("""
    SELECT c.*
    FROM conductores c
    LEFT JOIN automoviles a ON c.nombre = a.nombre_conductor
    WHERE a.nombre_conductor IS NULL
      AND c.edad >= :edad
""")

# both anti-joins glued together: same rows as a FULL OUTER JOIN
# filtered on either side being NULL
ORPHANS = text("""
    SELECT c.nombre, c.edad,
           NULL AS marca, NULL AS patente, NULL AS nombre_conductor
    FROM conductores c
    LEFT JOIN automoviles a ON c.nombre = a.nombre_conductor
    WHERE a.nombre_conductor IS NULL
    UNION ALL
    SELECT NULL AS nombre, NULL AS edad,
           a.marca, a.patente, a.nombre_conductor
    FROM automoviles a
    LEFT JOIN conductores c ON a.nombre_conductor = c.nombre
    WHERE c.nombre IS NULL
""")

# ---- Plate search ----
CAR_BY_PLATE = text("""
    SELECT a.*, c.edad
    FROM automoviles a
    LEFT JOIN conductores c ON a.nombre_conductor = c.nombre
    WHERE a.patente = :patente
""")

CARS_BY_PLATE_PREFIX = text("""
    SELECT a.*, c.edad
    FROM automoviles a
    LEFT JOIN conductores c ON a.nombre_conductor = c.nombre
    WHERE a.patente LIKE :patron
""")


def _rows(statement, params=None):
    result = db.session.execute(statement, params or {})
    return [dict(row._mapping) for row in result]


def all_drivers():
    return _rows(ALL_DRIVERS)


def all_cars():
    return _rows(ALL_CARS)


def drivers_without_car(min_age):
    return _rows(DRIVERS_WITHOUT_CAR, {"edad": min_age})


def orphans():
    # driver rows carry null car columns, car rows null driver columns
    return _rows(ORPHANS)


def cars_by_plate(plate):
    return _rows(CAR_BY_PLATE, {"patente": plate})


def cars_by_plate_prefix(prefix):
    # LIKE wildcards in the prefix are honored
    return _rows(CARS_BY_PLATE_PREFIX, {"patron": prefix + "%"})
