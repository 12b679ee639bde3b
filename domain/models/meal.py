"""
Meal catalog model.
"""

from sqlalchemy import Column, Integer, String

from domain.models.database import Base


class Meal(Base):
    """A catalog meal. ``protein`` is the category used by menu quotas."""

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, default="")
    protein = Column(String(100), index=True)
    cuisine = Column(String(100))
    cook_time = Column(String(50))
    cook_method = Column(String(100))
    source = Column(String(255))

    def __repr__(self) -> str:
        return f"<Meal id={self.id} name={self.name!r} protein={self.protein!r}>"
