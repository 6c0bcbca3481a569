"""Base repository with generic key-value operations.

Concrete repositories inherit from this and can add domain-specific queries.
"""

from typing import Any, TypeVar, Generic, Type

from equipment_registry.extensions import db

T = TypeVar("T", bound=db.Model)


class BaseRepository(Generic[T]):
    """Generic repository providing common database operations.

    Args:
        model_class: The SQLAlchemy model class to operate on.
    """

    def __init__(self, model_class: Type[T]):
        self._model = model_class

    def create(self, **kwargs) -> T:
        """Insert a new record and flush it to the session."""
        instance = self._model(**kwargs)
        db.session.add(instance)
        db.session.flush()
        return instance

    def get(self, primary_key: Any) -> T | None:
        """Fetch a single record by primary key (a tuple for composite keys)."""
        return db.session.get(self._model, primary_key)

    def update(self, instance: T, /, **kwargs) -> T:
        """Update an existing instance with keyword arguments."""
        for key, value in kwargs.items():
            setattr(instance, key, value)
        db.session.flush()
        return instance

    def put(self, primary_key: Any, /, **kwargs) -> T:
        """Overwrite the record at ``primary_key``, creating it when absent.

        ``primary_key`` is positional-only so column keywords such as
        ``key=`` pass through to the model.
        """
        instance = self.get(primary_key)
        if instance is None:
            return self.create(**kwargs)
        return self.update(instance, **kwargs)

    @staticmethod
    def commit() -> None:
        """Commit the current transaction."""
        db.session.commit()
