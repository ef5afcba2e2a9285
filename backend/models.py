from sqlalchemy import Column, String, Integer, Float, Date, DateTime, CheckConstraint, Index
from datetime import datetime, date
from database import Base


class Farm(Base):
    """
    A farm registered in the system.

    Identity is the integer primary key assigned by the database. Area is in
    hectares and may be unknown (NULL) for farms registered before surveying.
    """
    __tablename__ = 'farms'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    area = Column(Float, nullable=True)  # hectares
    creation_date = Column(Date, nullable=False, default=date.today)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("name != ''", name='ck_farms_name_not_empty'),
        CheckConstraint("location != ''", name='ck_farms_location_not_empty'),
        CheckConstraint("area IS NULL OR area > 0", name='ck_farms_area_positive'),
        Index('idx_farms_name', 'name'),
        Index('idx_farms_location', 'location'),
    )

    def __repr__(self) -> str:
        return f"<Farm id={self.id} name={self.name!r} location={self.location!r}>"
