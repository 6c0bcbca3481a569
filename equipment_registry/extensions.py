"""Flask extension singletons.

``db`` is the registries' key-value store and ``migrate`` manages its schema.
Both are bound to the app in ``create_app``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()
