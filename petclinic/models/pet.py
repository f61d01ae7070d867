from __future__ import annotations

from ..extensions import db
from .visit import Visit


class PetType(db.Model):
    __tablename__ = "types"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), nullable=False, unique=True)

    def __str__(self) -> str:
        return self.name


class Pet(db.Model):
    __tablename__ = "pets"

    id = db.Column(db.Integer, primary_key=True)
    owner_id = db.Column(
        db.Integer,
        db.ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type_id = db.Column(
        db.Integer,
        db.ForeignKey("types.id"),
        nullable=False,
    )

    name = db.Column(db.String(30), nullable=False, index=True)
    birth_date = db.Column(db.Date, nullable=True)

    owner = db.relationship("Owner", back_populates="pets")
    type = db.relationship("PetType")
    visits = db.relationship(
        "Visit",
        back_populates="pet",
        order_by=Visit.visit_date,
        cascade="all, delete-orphan",
    )

    @property
    def is_new(self) -> bool:
        """A pet is new until the database has handed out its identifier."""
        return self.id is None

    def add_visit(self, visit: Visit) -> None:
        if visit not in self.visits:
            self.visits.append(visit)

    def __repr__(self) -> str:
        return f"<Pet id={self.id} name={self.name!r}>"
