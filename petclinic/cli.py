from __future__ import annotations

from datetime import date

import click
from flask import current_app

from .extensions import db

from .models.owner import Owner
from .models.pet import Pet, PetType
from .models.visit import Visit
from .models.vet import Specialty, Vet


def _db_uri() -> str:
    return current_app.config.get("SQLALCHEMY_DATABASE_URI", "")

@click.command("init-db")
def init_db_cmd():
    uri = _db_uri()
    click.echo(f"Creating tables on DB: {uri}")
    db.create_all()
    click.echo("✔ Tables created.")

@click.command("reset-db")
@click.option("--force", is_flag=True, help="Drop + create (irreversible).")
def reset_db_cmd(force: bool):
    uri = _db_uri()
    if not force:
        click.echo("Add --force to confirm dropping all tables.")
        return
    click.echo(f"Dropping & creating tables on DB: {uri}")
    db.drop_all()
    db.create_all()
    click.echo("✔ Database reset.")


PET_TYPES = ["bird", "cat", "dog", "hamster", "lizard", "snake"]

SPECIALTIES = ["dentistry", "radiology", "surgery"]

VETS = [
    ("James", "Carter", []),
    ("Helen", "Leary", ["radiology"]),
    ("Linda", "Douglas", ["surgery", "dentistry"]),
    ("Rafael", "Ortega", ["surgery"]),
    ("Henry", "Stevens", ["radiology"]),
    ("Sharon", "Jenkins", []),
]

# (first, last, address, city, telephone, [(pet name, type, birth date)])
OWNERS = [
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023",
     [("Leo", "cat", date(2010, 9, 7))]),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749",
     [("Basil", "hamster", date(2012, 8, 6))]),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763",
     [("Rosy", "dog", date(2011, 4, 17)), ("Jewel", "dog", date(2010, 3, 7))]),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198",
     [("Iggy", "lizard", date(2010, 11, 30))]),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765",
     [("George", "snake", date(2010, 1, 20))]),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654",
     [("Samantha", "cat", date(2012, 9, 4)), ("Max", "cat", date(2012, 9, 4))]),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387",
     [("Lucky", "bird", date(2011, 8, 6))]),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683",
     [("Mulligan", "dog", date(2007, 2, 24))]),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435",
     [("Freddy", "bird", date(2010, 3, 9))]),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487",
     [("Lucky", "dog", date(2010, 6, 24)), ("Sly", "cat", date(2012, 6, 8))]),
]

# (owner full name, pet name, visit date, description)
VISITS = [
    ("Jean Coleman", "Samantha", date(2013, 1, 1), "rabies shot"),
    ("Jean Coleman", "Max", date(2013, 1, 2), "rabies shot"),
    ("Jean Coleman", "Max", date(2013, 1, 3), "neutered"),
    ("Jean Coleman", "Samantha", date(2013, 1, 4), "spayed"),
]


@click.command("seed-demo")
def seed_demo_cmd():
    uri = _db_uri()
    click.echo(f"Seeding on DB: {uri}")

    types = {name: PetType(name=name) for name in PET_TYPES}
    db.session.add_all(types.values())

    specialties = {name: Specialty(name=name) for name in SPECIALTIES}
    db.session.add_all(specialties.values())

    for first, last, skills in VETS:
        vet = Vet(first_name=first, last_name=last)
        for skill in skills:
            vet.add_specialty(specialties[skill])
        db.session.add(vet)

    owners: dict[str, Owner] = {}
    for first, last, address, city, telephone, pets in OWNERS:
        owner = Owner(
            first_name=first,
            last_name=last,
            address=address,
            city=city,
            telephone=telephone,
        )
        for pet_name, type_name, birth_date in pets:
            owner.add_pet(Pet(name=pet_name, type=types[type_name], birth_date=birth_date))
        db.session.add(owner)
        owners[f"{first} {last}"] = owner
    db.session.commit()

    for owner_name, pet_name, visit_date, description in VISITS:
        owner = owners[owner_name]
        pet = owner.get_pet_by_name(pet_name)
        owner.add_visit(pet.id, Visit(visit_date=visit_date, description=description))
    db.session.commit()

    click.echo(
        "✔ Seed completed:\n"
        f"  Pet types: {len(types)}\n"
        f"  Vets: {len(VETS)}\n"
        f"  Owners: {len(OWNERS)}\n"
        f"  Visits: {len(VISITS)}"
    )
