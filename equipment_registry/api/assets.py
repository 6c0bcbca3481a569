"""Asset API namespace — endpoints for the asset registry.

All routes delegate to ``AssetService``. Controllers are kept thin
(parse → validate → resolve caller → call service → respond).
"""

from flask import request
from flask_restx import Namespace, Resource, fields
from pydantic import ValidationError as PydanticValidationError

from equipment_registry.api.context import caller_from_request
from equipment_registry.domain.exceptions import AppError
from equipment_registry.schemas.asset_schema import AssetRegisterSchema, AssetTransferSchema
from equipment_registry.schemas.response import success_response, error_response
from equipment_registry.services.asset_service import AssetService

ns = Namespace("assets", description="Asset registry APIs")

# ---------------------------------------------------------------------------
# Swagger models (for documentation only)
# ---------------------------------------------------------------------------
asset_input_model = ns.model("AssetInput", {
    "name": fields.String(required=True),
    "model": fields.String(required=True),
    "serial_number": fields.String(required=True),
    "manufacturer": fields.String(required=True),
    "installation_date": fields.Integer(required=True, description="Unix timestamp"),
    "warranty_expiration": fields.Integer(required=True, description="Unix timestamp"),
})

transfer_model = ns.model("AssetTransfer", {
    "new_owner": fields.String(required=True, description="Identity of the new owner"),
})

# ---------------------------------------------------------------------------
# Service instance
# ---------------------------------------------------------------------------
_asset_svc = AssetService()


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@ns.route("")
class AssetList(Resource):
    """Register assets."""

    @ns.doc("register_asset")
    @ns.expect(asset_input_model)
    def post(self):
        """Register an asset owned by the caller."""
        try:
            caller = caller_from_request()
            data = AssetRegisterSchema(**(request.get_json(silent=True) or {}))
            asset_id = _asset_svc.register_asset(caller, **data.model_dump())
            return success_response({"asset_id": asset_id}, 201)
        except PydanticValidationError as err:
            return error_response(
                "Invalid input", "VALIDATION_ERROR", 400,
                details=err.errors(include_url=False, include_context=False),
            )
        except AppError as err:
            return error_response(err.message, err.error_code, err.status_code)


@ns.route("/<int:asset_id>")
@ns.param("asset_id", "The asset ID")
class AssetDetail(Resource):
    """Read a single asset."""

    @ns.doc("get_asset")
    def get(self, asset_id: int):
        """Return the asset, or ``null`` data when it does not exist."""
        return success_response(_asset_svc.get_asset(asset_id))


@ns.route("/<int:asset_id>/transfer")
@ns.param("asset_id", "The asset ID")
class AssetTransfer(Resource):
    """Transfer asset ownership."""

    @ns.doc("transfer_asset")
    @ns.expect(transfer_model)
    def post(self, asset_id: int):
        """Transfer the asset to a new owner. Only the current owner may call."""
        try:
            caller = caller_from_request()
            data = AssetTransferSchema(**(request.get_json(silent=True) or {}))
            result = _asset_svc.transfer_asset(caller, asset_id, data.new_owner)
            return success_response(result)
        except PydanticValidationError as err:
            return error_response(
                "Invalid input", "VALIDATION_ERROR", 400,
                details=err.errors(include_url=False, include_context=False),
            )
        except AppError as err:
            return error_response(err.message, err.error_code, err.status_code)
