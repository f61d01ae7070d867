from __future__ import annotations

import logging

from flask import Blueprint, abort, flash, redirect, render_template, url_for
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, InputRequired, ValidationError

from ..errors import OwnerNotFound
from ..messages import DUPLICATE, REQUIRED, TYPE_MISMATCH
from ..models.owner import Owner
from ..models.pet import Pet, PetType
from ..repositories import OwnerRepository, get_owner_repository
from ..validators import IsoDate, NotInFuture, parse_iso_date

logger = logging.getLogger(__name__)

pets_bp = Blueprint("pets", __name__, template_folder="../templates")

VIEWS_PETS_CREATE_OR_UPDATE_FORM = "pets/createOrUpdatePetForm.html"


class PetForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(message=REQUIRED)])
    type = StringField("Type", validators=[InputRequired(message=REQUIRED)])
    birth_date = StringField(
        "Birth Date",
        name="birthDate",
        validators=[InputRequired(message=REQUIRED), IsoDate(), NotInFuture()],
    )
    submit = SubmitField("Save Pet")

    def __init__(self, *args, owner=None, pet=None, pet_types=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.owner = owner
        self.pet = pet
        self.pet_types = list(pet_types)

    @property
    def pet_type(self) -> PetType | None:
        value = self.type.data
        if isinstance(value, PetType):
            return value
        for pet_type in self.pet_types:
            if pet_type.name == value:
                return pet_type
        return None

    @property
    def birth_date_value(self):
        return parse_iso_date(self.birth_date.data)

    def validate_type(self, field):
        if self.pet_type is None:
            raise ValidationError(TYPE_MISMATCH)

    def validate_name(self, field):
        if self.owner is None:
            return
        name = field.data.strip()
        if self.pet is None:
            taken = self.owner.get_pet_by_name(name, ignore_new=True) is not None
        else:
            taken = any(
                pet is not self.pet and pet.name == name for pet in self.owner.pets
            )
        if taken:
            raise ValidationError(DUPLICATE)


def find_owner(owner_id: int, owners: OwnerRepository | None = None) -> Owner:
    """Load the owner a pet request is about, or fail with OwnerNotFound."""
    if owners is None:
        owners = get_owner_repository()
    owner = owners.find_by_id(owner_id)
    if owner is None:
        raise OwnerNotFound(owner_id)
    return owner


def _render_form(form: PetForm, owner: Owner, pet: Pet | None = None):
    return render_template(
        VIEWS_PETS_CREATE_OR_UPDATE_FORM,
        form=form,
        owner=owner,
        pet=pet,
        pet_types=form.pet_types,
    )


@pets_bp.route("/owners/<int:owner_id>/pets/new", methods=["GET", "POST"])
def create_pet(owner_id):
    owners = get_owner_repository()
    owner = find_owner(owner_id, owners)
    form = PetForm(owner=owner, pet_types=owners.find_pet_types())
    if form.validate_on_submit():
        pet = Pet(
            name=form.name.data.strip(),
            type=form.pet_type,
            birth_date=form.birth_date_value,
        )
        owner.add_pet(pet)
        owners.save(owner)
        logger.info("Added pet %r to owner %s", pet.name, owner.id)
        flash("New Pet has been Added", "success")
        return redirect(url_for("owners.show_owner", owner_id=owner.id))
    return _render_form(form, owner)


@pets_bp.route("/owners/<int:owner_id>/pets/<int:pet_id>/edit", methods=["GET", "POST"])
def edit_pet(owner_id, pet_id):
    owners = get_owner_repository()
    owner = find_owner(owner_id, owners)
    pet = owner.get_pet(pet_id)
    if pet is None:
        abort(404)
    form = PetForm(obj=pet, owner=owner, pet=pet, pet_types=owners.find_pet_types())
    if form.validate_on_submit():
        pet.name = form.name.data.strip()
        pet.type = form.pet_type
        pet.birth_date = form.birth_date_value
        owners.save(owner)
        logger.info("Updated pet %s of owner %s", pet.id, owner.id)
        flash("Pet details has been edited", "success")
        return redirect(url_for("owners.show_owner", owner_id=owner.id))
    return _render_form(form, owner, pet)
