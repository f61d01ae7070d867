import logging

from flask import Blueprint, flash, redirect, render_template, request, url_for, current_app
from flask_wtf import FlaskForm
from wtforms import Form, StringField, SubmitField
from wtforms.validators import DataRequired, Regexp

from ..messages import NOT_FOUND, REQUIRED, TELEPHONE_INVALID
from ..models.owner import Owner
from ..pets.routes import find_owner
from ..repositories import get_owner_repository

logger = logging.getLogger(__name__)

owners_bp = Blueprint("owners", __name__, template_folder="../templates")

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = "owners/createOrUpdateOwnerForm.html"


class OwnerForm(FlaskForm):
    first_name = StringField(
        "First Name", name="firstName", validators=[DataRequired(message=REQUIRED)]
    )
    last_name = StringField(
        "Last Name", name="lastName", validators=[DataRequired(message=REQUIRED)]
    )
    address = StringField("Address", validators=[DataRequired(message=REQUIRED)])
    city = StringField("City", validators=[DataRequired(message=REQUIRED)])
    telephone = StringField(
        "Telephone",
        validators=[
            DataRequired(message=REQUIRED),
            Regexp(r"^\d{10}$", message=TELEPHONE_INVALID),
        ],
    )
    submit = SubmitField("Save Owner")

    def apply_to(self, owner: Owner) -> Owner:
        owner.first_name = self.first_name.data.strip()
        owner.last_name = self.last_name.data.strip()
        owner.address = self.address.data.strip()
        owner.city = self.city.data.strip()
        owner.telephone = self.telephone.data.strip()
        return owner


class FindOwnersForm(Form):
    last_name = StringField("Last name", name="lastName")


@owners_bp.route("/owners/new", methods=["GET", "POST"])
def create_owner():
    form = OwnerForm()
    if form.validate_on_submit():
        owner = form.apply_to(Owner())
        get_owner_repository().save(owner)
        logger.info("Created owner %s", owner.id)
        flash("New Owner Created", "success")
        return redirect(url_for("owners.show_owner", owner_id=owner.id))
    if request.method == "POST":
        flash("There was an error in creating the owner.", "danger")
    return render_template(VIEWS_OWNER_CREATE_OR_UPDATE_FORM, form=form, owner=None)


@owners_bp.get("/owners/find")
def find_owners_form():
    return render_template("owners/findOwners.html", form=FindOwnersForm())


@owners_bp.get("/owners")
def list_owners():
    form = FindOwnersForm(request.args)
    last_name = (form.last_name.data or "").strip()
    page = request.args.get("page", 1, type=int)
    per_page = current_app.config.get("OWNERS_PER_PAGE", 5)

    results = get_owner_repository().find_by_last_name(last_name, page, per_page)
    if results.total == 0:
        form.last_name.errors = [NOT_FOUND]
        return render_template("owners/findOwners.html", form=form)
    if results.total == 1:
        return redirect(url_for("owners.show_owner", owner_id=results.items[0].id))
    return render_template(
        "owners/ownersList.html",
        owners=results.items,
        pagination=results,
        last_name=last_name,
    )


@owners_bp.route("/owners/<int:owner_id>/edit", methods=["GET", "POST"])
def edit_owner(owner_id):
    owners = get_owner_repository()
    owner = find_owner(owner_id, owners)
    form = OwnerForm(obj=owner)
    if form.validate_on_submit():
        form.apply_to(owner)
        owners.save(owner)
        logger.info("Updated owner %s", owner.id)
        flash("Owner Values Updated", "success")
        return redirect(url_for("owners.show_owner", owner_id=owner.id))
    if request.method == "POST":
        flash("There was an error in updating the owner.", "danger")
    return render_template(VIEWS_OWNER_CREATE_OR_UPDATE_FORM, form=form, owner=owner)


@owners_bp.get("/owners/<int:owner_id>")
def show_owner(owner_id):
    owner = find_owner(owner_id)
    return render_template("owners/ownerDetails.html", owner=owner)
