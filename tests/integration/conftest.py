from datetime import date

import pytest
from flask import template_rendered

from petclinic import create_app
from petclinic.extensions import db
from petclinic.models.owner import Owner
from petclinic.models.pet import Pet, PetType
from petclinic.models.visit import Visit
from petclinic.models.vet import Specialty, Vet


def _assert_memory_db(uri: str):
    if uri != "sqlite:///:memory:":
        raise RuntimeError(
            f"Refusing to run tests on non-memory DB: {uri!r}. "
            "This guard protects your real database."
        )


@pytest.fixture(scope="function")
def app():
    flask_app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret-key",
            "WTF_CSRF_ENABLED": False,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "SQLALCHEMY_ENGINE_OPTIONS": {"connect_args": {"check_same_thread": False}},
            "SERVER_NAME": "localhost",
            "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        }
    )

    _assert_memory_db(flask_app.config["SQLALCHEMY_DATABASE_URI"])

    with flask_app.app_context():
        db.create_all()
        yield flask_app
        _assert_memory_db(flask_app.config["SQLALCHEMY_DATABASE_URI"])
        db.session.remove()
        db.drop_all()

@pytest.fixture()
def client(app):
    return app.test_client()

@pytest.fixture()
def captured_templates(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)

@pytest.fixture()
def make_owner(app):
    def _make_owner(first_name: str, last_name: str, **fields):
        o = Owner(
            first_name=first_name,
            last_name=last_name,
            address=fields.get("address", "110 W. Liberty St."),
            city=fields.get("city", "Madison"),
            telephone=fields.get("telephone", "6085551023"),
        )
        db.session.add(o)
        db.session.commit()
        return o
    return _make_owner


@pytest.fixture()
def sample_data(app, make_owner):
    hamster = PetType(name="hamster")
    cat = PetType(name="cat")
    db.session.add_all([hamster, cat])

    owner = make_owner("George", "Franklin")
    leo = Pet(name="Leo", type=cat, birth_date=date(2010, 9, 7))
    basil = Pet(name="Basil", type=hamster, birth_date=date(2012, 8, 6))
    owner.add_pet(leo)
    owner.add_pet(basil)
    db.session.commit()

    owner.add_visit(leo.id, Visit(visit_date=date(2013, 1, 1), description="rabies shot"))

    surgery = Specialty(name="surgery")
    carter = Vet(first_name="James", last_name="Carter")
    ortega = Vet(first_name="Rafael", last_name="Ortega")
    ortega.add_specialty(surgery)
    db.session.add_all([carter, ortega])
    db.session.commit()

    return {
        "owner_id": owner.id,
        "leo_id": leo.id,
        "basil_id": basil.id,
        "owner": owner,
        "leo": leo,
        "basil": basil,
        "hamster": hamster,
        "cat": cat,
        "vets": [carter, ortega],
    }


@pytest.fixture()
def last_template(captured_templates):
    def _last_template():
        assert captured_templates, "no template was rendered"
        return captured_templates[-1]
    return _last_template
