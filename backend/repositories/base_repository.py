"""
Base repository providing common CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Session

from .specifications import Specification

T = TypeVar('T')

# Range of a 64-bit INTEGER primary key
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class BaseRepository(Generic[T]):
    """
    Generic base repository over a model with an integer ``id`` primary key.

    Repositories flush but never commit; the owning service decides where the
    transaction ends. Listing methods return rows ordered by id.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def create(self, obj: T) -> T:
        """Add a new record and flush so the primary key is assigned."""
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Returns:
            Model instance or None if not found (including ids outside
            the range the id column can store)
        """
        if not MIN_ID <= id <= MAX_ID:
            return None
        return self.db.get(self.model, id)

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """
        Retrieve all records ordered by id.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
        """
        query = self.db.query(self.model).order_by(self.model.id)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def update(self, obj: T) -> T:
        """Flush pending changes on an already attached instance."""
        self.db.flush()
        return obj

    def delete(self, obj: T) -> None:
        self.db.delete(obj)
        self.db.flush()

    def delete_by_id(self, id: int) -> bool:
        """
        Delete a record by its ID.

        Returns:
            True if deleted, False if not found
        """
        obj = self.get_by_id(id)
        if obj is None:
            return False
        self.delete(obj)
        return True

    def count(self) -> int:
        return self.db.query(self.model).count()

    def exists(self, id: int) -> bool:
        if not MIN_ID <= id <= MAX_ID:
            return False
        return self.db.query(self.model.id).filter(self.model.id == id).first() is not None

    def find(self, spec: Specification[T]) -> List[T]:
        """
        Find records matching a Specification, ordered by id.

        Args:
            spec: Specification to match records against
        """
        return self.db.query(self.model).filter(spec.to_sql_filter()).order_by(self.model.id).all()

    def find_one(self, spec: Specification[T]) -> Optional[T]:
        """First record (lowest id) matching a Specification, or None."""
        return self.db.query(self.model).filter(spec.to_sql_filter()).order_by(self.model.id).first()
