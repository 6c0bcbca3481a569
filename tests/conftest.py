"""Shared test fixtures.

Every test starts from empty registries on an in-memory database. Identities
and dates follow the certification and asset examples used across the suite.
"""

import pytest

from equipment_registry import create_app
from equipment_registry.domain.caller import CallerContext
from equipment_registry.extensions import db as _db
from equipment_registry.services.asset_service import AssetService
from equipment_registry.services.certification_service import CertificationService

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
TECHNICIAN = "ST2PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGN"
OUTSIDER = "ST3PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGO"

EQUIPMENT = "Industrial Pump XP-5000"
FEB_2021 = 1612137600
FEB_2025 = 1738368000


@pytest.fixture(scope="session")
def app():
    """Application with the testing config; the registry owner is left unset."""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.drop_all()


@pytest.fixture(autouse=True)
def db_session(app):
    """Give each test empty asset and certification tables.

    Tables are re-created before and dropped after every test, which also
    resets the asset id counter and the contract owner.
    """
    with app.app_context():
        _db.create_all()
        yield _db.session
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture()
def client(app):
    """Flask test client; send the caller in ``X-Caller-Identity``."""
    return app.test_client()


@pytest.fixture()
def asset_service():
    return AssetService()


@pytest.fixture()
def cert_service():
    """Certification registry deployed by ``OWNER``."""
    service = CertificationService()
    service.initialize(OWNER)
    return service


@pytest.fixture()
def as_owner():
    return CallerContext(OWNER)


@pytest.fixture()
def as_outsider():
    return CallerContext(OUTSIDER)
