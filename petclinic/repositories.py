from __future__ import annotations

from flask import current_app

from .extensions import db
from .models.owner import Owner
from .models.pet import PetType
from .models.vet import Vet

OWNER_REPOSITORY_KEY = "petclinic.owners"
VET_REPOSITORY_KEY = "petclinic.vets"


class OwnerRepository:
    def find_by_id(self, owner_id: int) -> Owner | None:
        return db.session.get(Owner, owner_id)

    def find_by_last_name(self, last_name: str, page: int = 1, per_page: int = 5):
        """Owners whose last name starts with ``last_name``, one page at a time."""
        query = Owner.query
        if last_name:
            query = query.filter(Owner.last_name.startswith(last_name, autoescape=True))
        return query.order_by(Owner.last_name, Owner.id).paginate(
            page=page, per_page=per_page, error_out=False
        )

    def find_pet_types(self) -> list[PetType]:
        return PetType.query.order_by(PetType.name).all()

    def save(self, owner: Owner) -> Owner:
        db.session.add(owner)
        db.session.commit()
        return owner


class VetRepository:
    def find_all(self, page: int | None = None, per_page: int = 5):
        query = Vet.query.order_by(Vet.last_name, Vet.first_name)
        if page is None:
            return query.all()
        return query.paginate(page=page, per_page=per_page, error_out=False)


def init_repositories(app) -> None:
    app.extensions[OWNER_REPOSITORY_KEY] = OwnerRepository()
    app.extensions[VET_REPOSITORY_KEY] = VetRepository()


def get_owner_repository() -> OwnerRepository:
    return current_app.extensions[OWNER_REPOSITORY_KEY]


def get_vet_repository() -> VetRepository:
    return current_app.extensions[VET_REPOSITORY_KEY]
