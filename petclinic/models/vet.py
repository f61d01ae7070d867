from ..extensions import db

vet_specialties = db.Table(
    "vet_specialties",
    db.Column(
        "vet_id",
        db.Integer,
        db.ForeignKey("vets.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "specialty_id",
        db.Integer,
        db.ForeignKey("specialties.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Specialty(db.Model):
    __tablename__ = "specialties"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), nullable=False, unique=True)


class Vet(db.Model):
    __tablename__ = "vets"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(30), nullable=False)
    last_name = db.Column(db.String(30), nullable=False, index=True)

    specialties = db.relationship(
        "Specialty", secondary=vet_specialties, order_by=Specialty.name
    )

    @property
    def nr_of_specialties(self) -> int:
        return len(self.specialties)

    def add_specialty(self, specialty: Specialty) -> None:
        if specialty not in self.specialties:
            self.specialties.append(specialty)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "specialties": [{"id": s.id, "name": s.name} for s in self.specialties],
        }
