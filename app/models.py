# app/models.py
from . import db

# ---- Driver model ----
class Conductor(db.Model):
    __tablename__ = 'conductores'

    nombre = db.Column(db.String, primary_key=True)
    edad = db.Column(db.Integer, nullable=False)


# ---- Car model ----
# nombre_conductor is not a foreign key: a car may name a driver
# that is missing from conductores.
class Automovil(db.Model):
    __tablename__ = 'automoviles'

    patente = db.Column(db.String, primary_key=True)
    marca = db.Column(db.String, nullable=False)
    nombre_conductor = db.Column(db.String, nullable=True)
