"""baseline schema

Revision ID: 0001_baseline
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "0001_baseline"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _org_column() -> sa.Column:
    return sa.Column(
        "organization_id",
        sa.Uuid(),
        sa.ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    )


def _user_fk(name: str) -> sa.Column:
    return sa.Column(name, sa.Uuid(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)


def _indexes(table: str, *columns: str) -> None:
    for column in columns:
        op.create_index(op.f(f"ix_{table}_{column}"), table, [column])


def upgrade() -> None:
    op.create_table(
        "organizations",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("domain", sa.String(255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
    )

    op.create_table(
        "users",
        *_base_columns(),
        _org_column(),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("office", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
    )
    _indexes("users", "organization_id")

    op.create_table(
        "clients",
        *_base_columns(),
        _org_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("industry", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("total_billed", sa.Numeric(15, 2), nullable=False),
        sa.Column("risk_score", sa.Integer(), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
    )
    _indexes("clients", "organization_id", "name", "status")

    op.create_table(
        "cases",
        *_base_columns(),
        _org_column(),
        sa.Column("client_id", sa.Uuid(), sa.ForeignKey("clients.id", ondelete="SET NULL"), nullable=True),
        _user_fk("created_by"),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("client_name", sa.String(255), nullable=False),
        sa.Column("opposing_counsel", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("filing_date", sa.Date(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("value", sa.Numeric(15, 2), nullable=True),
        sa.Column("matter_type", sa.String(50), nullable=True),
        sa.Column("jurisdiction", sa.String(255), nullable=True),
        sa.Column("court", sa.String(255), nullable=True),
        sa.Column("docket_number", sa.String(100), nullable=True),
        sa.Column("billing_model", sa.String(20), nullable=True),
        sa.Column("judge", sa.String(255), nullable=True),
    )
    _indexes(
        "cases", "organization_id", "client_id", "client_name", "status",
        "filing_date", "matter_type", "jurisdiction",
    )

    op.create_table(
        "documents",
        *_base_columns(),
        _org_column(),
        sa.Column("case_id", sa.Uuid(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        _user_fk("uploaded_by"),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("doc_type", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("risk_score", sa.Integer(), nullable=True),
        sa.Column("tags", postgresql.JSONB(), nullable=False),
        sa.Column("source_module", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("is_encrypted", sa.Boolean(), nullable=False),
        sa.Column("shared_with_client", sa.Boolean(), nullable=False),
        sa.Column("file_size", sa.String(50), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False),
    )
    _indexes("documents", "organization_id", "case_id", "status")

    op.create_table(
        "document_versions",
        *_base_columns(),
        sa.Column("document_id", sa.Uuid(), sa.ForeignKey("documents.id", ondelete="CASCADE"), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        _user_fk("changed_by"),
        sa.Column("author", sa.String(255), nullable=True),
    )
    _indexes("document_versions", "document_id")

    op.create_table(
        "discovery_requests",
        *_base_columns(),
        _org_column(),
        sa.Column("case_id", sa.Uuid(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        sa.Column("request_type", sa.String(20), nullable=False),
        sa.Column("propounding_party", sa.String(255), nullable=False),
        sa.Column("responding_party", sa.String(255), nullable=False),
        sa.Column("service_date", sa.Date(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("response_preview", sa.Text(), nullable=True),
    )
    _indexes("discovery_requests", "organization_id", "case_id", "due_date", "status")

    op.create_table(
        "clauses",
        *_base_columns(),
        _org_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("usage_count", sa.Integer(), nullable=False),
        sa.Column("risk_rating", sa.String(10), nullable=False),
    )
    _indexes("clauses", "organization_id", "category")

    op.create_table(
        "clause_versions",
        *_base_columns(),
        sa.Column("clause_id", sa.Uuid(), sa.ForeignKey("clauses.id", ondelete="CASCADE"), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(255), nullable=True),
    )
    _indexes("clause_versions", "clause_id")

    op.create_table(
        "jurisdictions",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("jurisdiction_type", sa.String(20), nullable=False),
        sa.Column("parent_code", sa.String(50), nullable=True),
        sa.Column("court_level", sa.String(100), nullable=True),
    )
    _indexes("jurisdictions", "jurisdiction_type")

    op.create_table(
        "tasks",
        *_base_columns(),
        _org_column(),
        sa.Column("case_id", sa.Uuid(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=True),
        _user_fk("assignee_id"),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("priority", sa.String(10), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("sla_warning", sa.Boolean(), nullable=False),
        sa.Column("automated_trigger", sa.String(255), nullable=True),
    )
    _indexes("tasks", "organization_id", "case_id", "assignee_id", "status")

    op.create_table(
        "time_entries",
        *_base_columns(),
        _org_column(),
        sa.Column("case_id", sa.Uuid(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        _user_fk("user_id"),
        sa.Column("entry_date", sa.Date(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("rate", sa.Numeric(10, 2), nullable=False),
        sa.Column("total", sa.Numeric(15, 2), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
    )
    _indexes("time_entries", "organization_id", "case_id", "user_id", "status")

    op.create_table(
        "judge_profiles",
        *_base_columns(),
        _org_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("court", sa.String(255), nullable=False),
        sa.Column("grant_rate_dismiss", sa.Float(), nullable=True),
        sa.Column("grant_rate_summary", sa.Float(), nullable=True),
        sa.Column("avg_case_duration", sa.Integer(), nullable=True),
        sa.Column("tendencies", postgresql.JSONB(), nullable=False),
    )
    _indexes("judge_profiles", "organization_id", "court")

    op.create_table(
        "opposing_counsel_profiles",
        *_base_columns(),
        _org_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("firm", sa.String(255), nullable=False),
        sa.Column("settlement_rate", sa.Float(), nullable=True),
        sa.Column("trial_rate", sa.Float(), nullable=True),
        sa.Column("avg_settlement_variance", sa.Float(), nullable=True),
    )
    _indexes("opposing_counsel_profiles", "organization_id", "firm")

    op.create_table(
        "audit_log_entries",
        *_base_columns(),
        _org_column(),
        _user_fk("user_id"),
        sa.Column("user_name", sa.String(255), nullable=True),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("resource", sa.String(255), nullable=False),
        sa.Column("ip", sa.String(64), nullable=True),
    )
    _indexes("audit_log_entries", "organization_id", "user_id", "action", "resource")

    op.create_table(
        "search_queries",
        *_base_columns(),
        _org_column(),
        _user_fk("user_id"),
        sa.Column("query_text", sa.Text(), nullable=False),
        sa.Column("mode", sa.String(20), nullable=False),
        sa.Column("result_count", sa.Integer(), nullable=False),
        sa.Column("execution_ms", sa.Float(), nullable=False),
    )
    _indexes("search_queries", "organization_id")

    op.create_table(
        "analytics_events",
        *_base_columns(),
        _org_column(),
        _user_fk("user_id"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("properties", postgresql.JSONB(), nullable=False),
        sa.Column("occurred_at", sa.DateTime(timezone=True), nullable=False),
    )
    _indexes("analytics_events", "organization_id", "name")


def downgrade() -> None:
    for table in (
        "analytics_events",
        "search_queries",
        "audit_log_entries",
        "opposing_counsel_profiles",
        "judge_profiles",
        "time_entries",
        "tasks",
        "jurisdictions",
        "clause_versions",
        "clauses",
        "discovery_requests",
        "document_versions",
        "documents",
        "cases",
        "clients",
        "users",
        "organizations",
    ):
        op.drop_table(table)
