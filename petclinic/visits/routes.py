import logging

from flask import Blueprint, abort, flash, redirect, render_template, url_for
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Optional

from ..messages import REQUIRED
from ..models.visit import Visit
from ..pets.routes import find_owner
from ..repositories import get_owner_repository
from ..validators import IsoDate, parse_iso_date

logger = logging.getLogger(__name__)

visits_bp = Blueprint("visits", __name__, template_folder="../templates")


class VisitForm(FlaskForm):
    visit_date = StringField("Date", name="date", validators=[Optional(), IsoDate()])
    description = StringField(
        "Description", validators=[DataRequired(message=REQUIRED)]
    )
    submit = SubmitField("Add Visit")


@visits_bp.route(
    "/owners/<int:owner_id>/pets/<int:pet_id>/visits/new", methods=["GET", "POST"]
)
def create_visit(owner_id, pet_id):
    owners = get_owner_repository()
    owner = find_owner(owner_id, owners)
    pet = owner.get_pet(pet_id)
    if pet is None:
        abort(404)

    form = VisitForm()
    if form.validate_on_submit():
        visit = Visit(description=form.description.data.strip())
        visit_date = parse_iso_date(form.visit_date.data)
        if visit_date is not None:
            visit.visit_date = visit_date
        owner.add_visit(pet.id, visit)
        owners.save(owner)
        logger.info("Booked visit for pet %s of owner %s", pet.id, owner.id)
        flash("Your visit has been booked", "success")
        return redirect(url_for("owners.show_owner", owner_id=owner.id))
    return render_template(
        "pets/createOrUpdateVisitForm.html", form=form, owner=owner, pet=pet
    )
