"""workbooks_and_submissions

Create companies, submissions and workbook_submissions.

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-18 09:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


revision = "a1c3e5f7b9d2"
down_revision = None
branch_labels = None
depends_on = None


def _table_names(bind) -> set[str]:
    return set(sa.inspect(bind).get_table_names())


def upgrade():
    existing_tables = _table_names(op.get_bind())

    if "companies" not in existing_tables:
        op.create_table(
            "companies",
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column("name", sa.String(length=200), nullable=False),
            sa.Column("contact_email", sa.String(length=200), nullable=True),
            sa.Column("contact_phone", sa.String(length=200), nullable=True),
            sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.PrimaryKeyConstraint("id"),
        )

    if "submissions" not in existing_tables:
        op.create_table(
            "submissions",
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column("owner_user_id", sa.String(length=64), nullable=False),
            sa.Column("company_id", sa.String(length=36), nullable=False),
            sa.Column("status", sa.String(length=20), nullable=False, server_default="draft"),
            sa.Column("decision_note", sa.String(length=2000), nullable=True),
            sa.Column("decided_by_user_id", sa.String(length=64), nullable=True),
            sa.Column("decided_at_utc", sa.DateTime(timezone=True), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
            sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
            sa.CheckConstraint(
                "status IN ('draft','in_progress','completed','submitted','approved','rejected')",
                name="ck_submission_status",
            ),
        )
        op.create_index("ix_submissions_owner_user_id", "submissions", ["owner_user_id"])
        op.create_index("ix_submissions_company_id", "submissions", ["company_id"])

    if "workbook_submissions" not in existing_tables:
        op.create_table(
            "workbook_submissions",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("user_id", sa.String(length=64), nullable=False),
            sa.Column("company_id", sa.String(length=36), nullable=False),
            sa.Column("title", sa.String(length=200), nullable=False),
            sa.Column("workbook_type", sa.String(length=30), nullable=False),
            sa.Column("data", sa.Text(), nullable=True),
            sa.Column("status", sa.String(length=20), nullable=False, server_default="draft"),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("submission_id", sa.String(length=36), nullable=True),
            sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
            sa.ForeignKeyConstraint(["submission_id"], ["submissions.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
            sa.CheckConstraint(
                "status IN ('draft','submitted','approved','completed')",
                name="ck_workbook_submission_status",
            ),
            sa.CheckConstraint(
                "workbook_type IN ('org_info','quality_assurance','training_qa')",
                name="ck_workbook_submission_type",
            ),
        )
        op.create_index("ix_workbook_submissions_company_id", "workbook_submissions", ["company_id"])
        op.create_index("ix_workbook_submissions_submission_id", "workbook_submissions", ["submission_id"])


def downgrade():
    op.drop_index("ix_workbook_submissions_submission_id", table_name="workbook_submissions")
    op.drop_index("ix_workbook_submissions_company_id", table_name="workbook_submissions")
    op.drop_table("workbook_submissions")
    op.drop_index("ix_submissions_company_id", table_name="submissions")
    op.drop_index("ix_submissions_owner_user_id", table_name="submissions")
    op.drop_table("submissions")
    op.drop_table("companies")
