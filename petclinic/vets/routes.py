from flask import Blueprint, current_app, jsonify, render_template, request

from ..repositories import get_vet_repository

vets_bp = Blueprint("vets", __name__, template_folder="../templates")


@vets_bp.get("/vets.html")
def list_vets():
    page = request.args.get("page", 1, type=int)
    per_page = current_app.config.get("VETS_PER_PAGE", 5)
    pagination = get_vet_repository().find_all(page=page, per_page=per_page)
    return render_template(
        "vets/vetList.html", vets=pagination.items, pagination=pagination
    )


@vets_bp.get("/vets")
def vets_json():
    """Machine readable vet list."""
    vets = get_vet_repository().find_all()
    return jsonify({"vetList": [v.to_dict() for v in vets]})
