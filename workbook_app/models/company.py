"""
Company model: the scoping unit for workbooks and submissions.

A non-privileged caller may only see records whose ``company_id`` equals
the company sent by the identity gateway.
"""

import uuid
from datetime import datetime, timezone

from workbook_app.models import db


class Company(db.Model):
    """Training-provider company."""

    __tablename__ = "companies"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(200), nullable=False)
    contact_email = db.Column(db.String(200), nullable=True)
    contact_phone = db.Column(db.String(200), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "contact_email": self.contact_email,
            "contact_phone": self.contact_phone,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<Company {self.id}: {self.name}>"
