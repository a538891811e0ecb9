from datetime import datetime

from app import db
from app.projects.calculator.core.constants import CalculationOperation


class Calculation(db.Model):
    __tablename__ = 'calculations'

    id = db.Column(db.Integer, primary_key=True)
    first_number = db.Column(db.Float, nullable=False)
    second_number = db.Column(db.Float, nullable=False)
    operation = db.Column(
        db.Enum(CalculationOperation, name='calculation_operation'),
        nullable=False
    )
    result = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'first_number': self.first_number,
            'second_number': self.second_number,
            'operation': self.operation.value,
            'result': self.result,
            'created_at': self.created_at.isoformat(),
        }

    def __repr__(self):
        return f'<Calculation {self.id}: {self.first_number} {self.operation.value} {self.second_number} = {self.result}>'
