from datetime import date

from ..extensions import db


class Visit(db.Model):
    __tablename__ = "visits"

    id = db.Column(db.Integer, primary_key=True)
    pet_id = db.Column(
        db.Integer,
        db.ForeignKey("pets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    visit_date = db.Column(db.Date, nullable=False, default=date.today)
    description = db.Column(db.String(255), nullable=False)

    pet = db.relationship("Pet", back_populates="visits")

    def __init__(self, **kwargs):
        kwargs.setdefault("visit_date", date.today())
        super().__init__(**kwargs)
