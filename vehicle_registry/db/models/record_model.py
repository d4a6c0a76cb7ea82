import enum
import uuid

from sqlalchemy import Column, Date, DateTime, Enum, Index, String, func
from sqlalchemy.dialects.postgresql import UUID

from vehicle_registry.db.base import Base


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class Record(Base):
    __tablename__ = "records"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(50), nullable=False)
    phone_number = Column(String(20), nullable=False)
    birth_date = Column(Date, nullable=False)
    gender = Column(
        Enum(Gender, name="gender", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    car_number = Column(String(8), nullable=False)
    car_type = Column(String(50), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("uq_records_phone_number", "phone_number", unique=True),
        Index("uq_records_car_number", "car_number", unique=True),
        Index("ix_records_created_at", created_at.desc()),
    )

    def __repr__(self):
        return f"<Record(username={self.username}, car={self.car_type} {self.car_number})>"
