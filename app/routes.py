import re

from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from . import db, queries
from .logging import get_logger

bp = Blueprint('api', __name__)

LOG = get_logger("routes")

_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')

# widest integer a database driver will bind
_INT64_MIN, _INT64_MAX = -2 ** 63, 2 ** 63 - 1


def parse_int(value):
    """Leading integer of ``value`` ("42abc" -> 42), or None if there is none.

    Values past the signed 64-bit range are clamped to its ends.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return min(max(int(match.group(1)), _INT64_MIN), _INT64_MAX)


def _query_failed(message):
    LOG.exception(message)
    db.session.rollback()
    return jsonify({'error': message}), 500


# ---- Health ----
@bp.route('/')
def home():
    return '¡API de Conductores y Automóviles funcionando!'


# ---- Full listings ----
@bp.route('/conductores')
def conductores():
    try:
        rows = queries.all_drivers()
    except SQLAlchemyError:
        return _query_failed('Error al consultar conductores')
    return jsonify(rows), 200


@bp.route('/automoviles')
def automoviles():
    try:
        rows = queries.all_cars()
    except SQLAlchemyError:
        return _query_failed('Error al consultar automoviles')
    return jsonify(rows), 200


# ---- Outer joins ----
@bp.route('/conductoressinauto')
def conductores_sin_auto():
    edad = parse_int(request.args.get('edad'))
    if edad is None:
        return jsonify({'error': 'El parámetro edad es obligatorio y debe ser un número'}), 400

    try:
        rows = queries.drivers_without_car(edad)
    except SQLAlchemyError:
        return _query_failed('Error al consultar conductores sin auto')
    return jsonify(rows), 200


@bp.route('/solitos')
def solitos():
    try:
        rows = queries.orphans()
    except SQLAlchemyError:
        return _query_failed('Error al consultar solitos')
    return jsonify(rows), 200


# ---- Plate search ----
@bp.route('/auto')
def auto():
    patente = request.args.get('patente')
    iniciopatente = request.args.get('iniciopatente')

    if not patente and not iniciopatente:
        return jsonify({
            'error': 'Debe proporcionar el parámetro "patente" o "iniciopatente"'
        }), 400

    try:
        if patente:
            rows = queries.cars_by_plate(patente)
        else:
            rows = queries.cars_by_plate_prefix(iniciopatente)
    except SQLAlchemyError:
        return _query_failed('Error al buscar automóvil')

    if not rows:
        return jsonify({
            'mensaje': 'No se encontraron automóviles con los criterios especificados'
        }), 404

    return jsonify(rows), 200
