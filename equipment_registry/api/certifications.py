"""Certification API namespace — endpoints for the certification registry.

The composite (technician, equipment_type) key travels in the body or the
query string, never in the path, so equipment types may contain any
character.
"""

from datetime import datetime, timezone

from flask import request
from flask_restx import Namespace, Resource, fields
from pydantic import ValidationError as PydanticValidationError

from equipment_registry.api.context import caller_from_request
from equipment_registry.domain.exceptions import AppError
from equipment_registry.schemas.certification_schema import (
    CertificationIssueSchema,
    CertificationKeySchema,
    CertificationStatusQuerySchema,
    IssuerCreateSchema,
    IssuerQuerySchema,
)
from equipment_registry.schemas.response import success_response, error_response
from equipment_registry.services.certification_service import CertificationService

ns = Namespace("certifications", description="Technician certification registry APIs")

# ---------------------------------------------------------------------------
# Swagger models
# ---------------------------------------------------------------------------
issuer_model = ns.model("IssuerInput", {
    "issuer": fields.String(required=True, description="Identity to authorize"),
})

certification_key_model = ns.model("CertificationKey", {
    "technician": fields.String(required=True),
    "equipment_type": fields.String(required=True),
})

certification_model = ns.inherit("CertificationInput", certification_key_model, {
    "certification_date": fields.Integer(required=True, description="Unix timestamp"),
    "expiration_date": fields.Integer(required=True, description="Unix timestamp"),
    "certification_level": fields.Integer(required=True),
})

# ---------------------------------------------------------------------------
# Service instance
# ---------------------------------------------------------------------------
_cert_svc = CertificationService()


def _invalid_input(err: PydanticValidationError):
    return error_response(
        "Invalid input", "VALIDATION_ERROR", 400,
        details=err.errors(include_url=False, include_context=False),
    )


# ---------------------------------------------------------------------------
# Issuer routes
# ---------------------------------------------------------------------------
@ns.route("/issuers")
class IssuerList(Resource):
    """Look up and grow the issuer allow-list."""

    @ns.doc("is_authorized_issuer", params={"identity": "The identity to look up"})
    def get(self):
        """Return whether the identity is an authorized issuer."""
        try:
            query = IssuerQuerySchema(**request.args.to_dict())
        except PydanticValidationError as err:
            return _invalid_input(err)
        return success_response({
            "identity": query.identity,
            "is_authorized": _cert_svc.is_authorized_issuer(query.identity),
        })

    @ns.doc("add_authorized_issuer")
    @ns.expect(issuer_model)
    def post(self):
        """Authorize an issuer. Only the contract owner may call."""
        try:
            caller = caller_from_request()
            data = IssuerCreateSchema(**(request.get_json(silent=True) or {}))
            result = _cert_svc.add_authorized_issuer(caller, data.issuer)
            return success_response(result, 201)
        except PydanticValidationError as err:
            return _invalid_input(err)
        except AppError as err:
            return error_response(err.message, err.error_code, err.status_code)


# ---------------------------------------------------------------------------
# Certification routes
# ---------------------------------------------------------------------------
@ns.route("")
class CertificationList(Resource):
    """Issue certifications."""

    @ns.doc("issue_certification")
    @ns.expect(certification_model)
    def post(self):
        """Issue or re-issue a certification. Authorized issuers only."""
        try:
            caller = caller_from_request()
            data = CertificationIssueSchema(**(request.get_json(silent=True) or {}))
            result = _cert_svc.issue_certification(caller, **data.model_dump())
            return success_response(result, 201)
        except PydanticValidationError as err:
            return _invalid_input(err)
        except AppError as err:
            return error_response(err.message, err.error_code, err.status_code)


@ns.route("/status")
class CertificationStatus(Resource):
    """Evaluate certification validity at a point in time."""

    @ns.doc("is_certified", params={
        "technician": "Technician identity",
        "equipment_type": "Equipment type",
        "current_time": "Unix timestamp (defaults to now)",
    })
    def get(self):
        """Return whether the technician is currently certified."""
        try:
            query = CertificationStatusQuerySchema(**request.args.to_dict())
        except PydanticValidationError as err:
            return _invalid_input(err)

        current_time = query.current_time
        if current_time is None:
            current_time = int(datetime.now(timezone.utc).timestamp())

        return success_response({
            "technician": query.technician,
            "equipment_type": query.equipment_type,
            "current_time": current_time,
            "is_certified": _cert_svc.is_certified(
                query.technician, query.equipment_type, current_time,
            ),
        })


@ns.route("/record")
class CertificationRecord(Resource):
    """Read the stored certification record."""

    @ns.doc("get_certification", params={
        "technician": "Technician identity",
        "equipment_type": "Equipment type",
    })
    def get(self):
        """Return the record, or ``null`` data when none was ever issued."""
        try:
            key = CertificationKeySchema(**request.args.to_dict())
        except PydanticValidationError as err:
            return _invalid_input(err)
        return success_response(_cert_svc.get_certification(key.technician, key.equipment_type))


@ns.route("/revoke")
class CertificationRevoke(Resource):
    """Revoke certifications."""

    @ns.doc("revoke_certification")
    @ns.expect(certification_key_model)
    def post(self):
        """Deactivate a certification. Any authorized issuer may call."""
        try:
            caller = caller_from_request()
            key = CertificationKeySchema(**(request.get_json(silent=True) or {}))
            result = _cert_svc.revoke_certification(caller, key.technician, key.equipment_type)
            return success_response(result)
        except PydanticValidationError as err:
            return _invalid_input(err)
        except AppError as err:
            return error_response(err.message, err.error_code, err.status_code)
