"""Initial schema: tickets, operator skills, SLA configs.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute(sa.schema.CreateSequence(sa.Sequence("tickets_ticket_number_seq")))

    # Tickets
    op.create_table(
        "tickets",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "ticket_number", sa.Integer, nullable=False, unique=True,
            server_default=sa.text("nextval('tickets_ticket_number_seq')"),
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(20), nullable=False, server_default="open"),
        sa.Column("customer_id", sa.String(64), nullable=False),
        sa.Column("assigned_operator_id", sa.String(64), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("first_response_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("resolved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("closed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("version", sa.Integer, nullable=False, server_default="1"),
    )
    op.create_index("idx_tickets_status", "tickets", ["status"])
    op.create_index("idx_tickets_priority", "tickets", ["priority"])
    op.create_index(
        "idx_tickets_operator_status", "tickets", ["assigned_operator_id", "status"]
    )

    # Operator skills
    op.create_table(
        "operator_skills",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("skill", sa.String(20), nullable=False),
        sa.Column("proficiency_level", sa.Integer, nullable=False, server_default="3"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("user_id", "skill", name="uq_operator_skills_user_skill"),
        sa.CheckConstraint(
            "proficiency_level BETWEEN 1 AND 5", name="ck_operator_skills_proficiency"
        ),
    )
    op.create_index("idx_operator_skills_skill", "operator_skills", ["skill"])

    # SLA configs
    op.create_table(
        "sla_configs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("priority", sa.String(20), nullable=False, unique=True),
        sa.Column("response_hours", sa.Integer, nullable=False),
        sa.Column("resolution_hours", sa.Integer, nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    op.drop_table("sla_configs")
    op.drop_index("idx_operator_skills_skill", table_name="operator_skills")
    op.drop_table("operator_skills")
    op.drop_index("idx_tickets_operator_status", table_name="tickets")
    op.drop_index("idx_tickets_priority", table_name="tickets")
    op.drop_index("idx_tickets_status", table_name="tickets")
    op.drop_table("tickets")
    op.execute(sa.schema.DropSequence(sa.Sequence("tickets_ticket_number_seq")))
