"""
Catalog Blueprint: read-only reference lists used by workbook forms.

Endpoints:
    GET /api/v1/catalogs/provinces         South African provinces
    GET /api/v1/catalogs/programme-types   canonical programme types, overview order
"""

from flask import Blueprint, jsonify

from workbook_app.catalogs.org_info import PROGRAMME_TYPES_ORDERED, SOUTH_AFRICA_PROVINCES

catalog_bp = Blueprint("catalogs", __name__, url_prefix="/api/v1/catalogs")


@catalog_bp.route("/provinces", methods=["GET"])
def provinces():
    return jsonify({"items": list(SOUTH_AFRICA_PROVINCES)}), 200


@catalog_bp.route("/programme-types", methods=["GET"])
def programme_types():
    return jsonify({"items": list(PROGRAMME_TYPES_ORDERED)}), 200
