"""Seed script — deploys the registries with demo data for local testing.

Initializes the certification registry with a deployer identity (unless it
already is), then registers a few assets and certifications through the
services so every record passes the same checks as an API call.

Usage:
    python seed.py
"""

from equipment_registry import create_app
from equipment_registry.domain.caller import CallerContext
from equipment_registry.services.asset_service import AssetService
from equipment_registry.services.certification_service import CertificationService

DEPLOYER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
PLANT_MANAGER = "ST2PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGN"
TRAINING_CENTER = "ST3PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGO"
TECHNICIANS = [
    "ST4PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGP",
    "ST5PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGQ",
]

FEB_2021 = 1612137600
FEB_2025 = 1738368000
FEB_2031 = 1927670400


def seed():
    """Initialize the registries and insert demo assets and certifications."""
    app = create_app("development")

    with app.app_context():
        assets = AssetService()
        certs = CertificationService()

        # Check if already seeded
        if assets.get_last_asset_id() > 0:
            print("⚠ Seed data already exists — skipping.")
            return

        if not certs.is_initialized():
            certs.initialize(DEPLOYER)

        deployer = CallerContext(DEPLOYER)
        manager = CallerContext(PLANT_MANAGER)

        # -- Assets --
        pump_id = assets.register_asset(
            deployer, "Industrial Pump", "XP-5000", "SN12345", "PumpCo", FEB_2021, FEB_2025,
        )
        assets.register_asset(
            deployer, "Air Compressor", "AC-220", "CMP-0042", "AirWorks", FEB_2021, FEB_2031,
        )
        assets.register_asset(
            manager, "Steam Boiler", "B-200", "BLR-7781", "HeatCorp", FEB_2021, FEB_2031,
        )
        assets.transfer_asset(deployer, pump_id, PLANT_MANAGER)

        # -- Issuers --
        certs.add_authorized_issuer(deployer, TRAINING_CENTER)

        # -- Certifications --
        center = CallerContext(TRAINING_CENTER)
        certs.issue_certification(deployer, TECHNICIANS[0], "Industrial Pump XP-5000", FEB_2021, FEB_2031, 3)
        certs.issue_certification(center, TECHNICIANS[0], "Steam Boiler B-200", FEB_2021, FEB_2025, 1)
        certs.issue_certification(center, TECHNICIANS[1], "Air Compressor AC-220", FEB_2021, FEB_2031, 2)

        print("✓ Seed data inserted successfully.")


if __name__ == "__main__":
    seed()
