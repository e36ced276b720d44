"""
SQLAlchemy ORM models for database tables.

One table: developers. Skills are embedded as a JSON column - they have no
lifecycle outside their developer row.
"""
from sqlalchemy import Column, String, Text, DateTime, Integer, JSON, Index
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from devroster.domain.entities import Developer, Skills

Base = declarative_base()


class DeveloperModel(Base):
    """
    Developers table - one row per roster entry.
    """
    __tablename__ = "developers"

    id = Column(String(50), primary_key=True)  # Format: "dev_<12 hex chars>"
    name = Column(String(200), nullable=False)
    position = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False)
    experience_years = Column(Integer, nullable=False, default=0)
    image_url = Column(Text, nullable=False)
    skills = Column(JSON, nullable=False)  # {"communicative": 80, "efficient": 60, ...}
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_developers_created_at', 'created_at'),
    )

    def to_entity(self) -> Developer:
        return Developer(
            id=self.id,
            name=self.name,
            position=self.position,
            location=self.location,
            experience_years=self.experience_years,
            image_url=self.image_url,
            skills=Skills.from_dict(self.skills),
        )
