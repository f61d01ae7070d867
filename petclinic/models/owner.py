from __future__ import annotations

from ..extensions import db
from .pet import Pet
from .visit import Visit


class Owner(db.Model):
    """A pet owner and the pets they bring to the clinic.

    The pet list keeps insertion order and is not thread safe; concurrent
    writers must serialize access to a single owner themselves.
    """

    __tablename__ = "owners"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(30), nullable=False)
    last_name = db.Column(db.String(30), nullable=False, index=True)
    address = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(80), nullable=False)
    telephone = db.Column(db.String(20), nullable=False)

    pets = db.relationship(
        "Pet",
        back_populates="owner",
        order_by=Pet.id,
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_pet(self, pet: Pet) -> None:
        if pet not in self.pets:
            self.pets.append(pet)

    def get_pet(self, pet_id: int | None) -> Pet | None:
        """Return the persisted pet with the given id, or None.

        New pets never match, so a missing id cannot select an unsaved pet.
        """
        if pet_id is None:
            return None
        for pet in self.pets:
            if not pet.is_new and pet.id == pet_id:
                return pet
        return None

    def get_pet_by_name(self, name: str | None, ignore_new: bool = False) -> Pet | None:
        """Return the first pet named exactly ``name``, or None.

        An empty name never matches. With ``ignore_new`` unsaved pets are
        skipped.
        """
        if not name:
            return None
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name == name:
                return pet
        return None

    def add_visit(self, pet_id: int, visit: Visit) -> None:
        pet = self.get_pet(pet_id)
        if pet is None:
            raise ValueError(f"Invalid pet identifier: {pet_id}")
        pet.add_visit(visit)

    def __repr__(self) -> str:
        return f"<Owner id={self.id} name={self.full_name!r}>"
