"""create investment tables

Revision ID: 001
Revises: 
Create Date: 2026-10-19 09:00:00
"""

from alembic import op
import sqlalchemy as sa


revision = "001"
down_revision = None
branch_labels = None
depends_on = None

metal_enum = sa.Enum("gold", "silver", name="metal")
interest_type_enum = sa.Enum("simple", "compound", name="interesttype")
transaction_type_enum = sa.Enum("buy", "sell", name="transactiontype")


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "metal_transactions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("metal", metal_enum, nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("amount_sent", sa.Numeric(14, 2), nullable=False),
        sa.Column("rate", sa.Numeric(12, 2), nullable=False),
        sa.Column("tax_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("quantity_purchased", sa.Numeric(14, 4), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_metal_transactions_user_id", "metal_transactions", ["user_id"])
    op.create_index("ix_metal_transactions_date", "metal_transactions", ["date"])
    op.create_index("idx_metal_user_metal", "metal_transactions", ["user_id", "metal"])

    op.create_table(
        "fixed_deposits",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("bank_name", sa.String(120), nullable=False),
        sa.Column("interest_rate", sa.Numeric(5, 2), nullable=False),
        sa.Column("duration_months", sa.Integer(), nullable=False),
        sa.Column("interest_type", interest_type_enum, nullable=False),
        sa.Column("compounding_frequency", sa.Integer(), nullable=False),
        sa.Column("maturity_date", sa.Date(), nullable=False),
        sa.Column("maturity_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_fixed_deposits_user_id", "fixed_deposits", ["user_id"])
    op.create_index("ix_fixed_deposits_date", "fixed_deposits", ["date"])

    op.create_table(
        "recurring_deposits",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("monthly_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("bank_name", sa.String(120), nullable=False),
        sa.Column("interest_rate", sa.Numeric(5, 2), nullable=False),
        sa.Column("duration_months", sa.Integer(), nullable=False),
        sa.Column("maturity_date", sa.Date(), nullable=False),
        sa.Column("total_invested", sa.Numeric(14, 2), nullable=False),
        sa.Column("maturity_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("installments_paid", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_recurring_deposits_user_id", "recurring_deposits", ["user_id"])
    op.create_index("ix_recurring_deposits_date", "recurring_deposits", ["date"])

    op.create_table(
        "stock_transactions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("symbol", sa.String(32), nullable=False),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("quantity", sa.Numeric(14, 4), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("total_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("transaction_type", transaction_type_enum, nullable=False),
        sa.Column("brokerage_charges", sa.Numeric(12, 2), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_stock_transactions_user_id", "stock_transactions", ["user_id"])
    op.create_index("ix_stock_transactions_date", "stock_transactions", ["date"])
    op.create_index("idx_stock_user_symbol", "stock_transactions", ["user_id", "symbol"])

    op.create_table(
        "mutual_fund_transactions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("fund_name", sa.String(255), nullable=False),
        sa.Column("scheme_code", sa.String(64), nullable=True),
        sa.Column("units", sa.Numeric(16, 4), nullable=False),
        sa.Column("nav", sa.Numeric(12, 4), nullable=False),
        sa.Column("total_amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("transaction_type", transaction_type_enum, nullable=False),
        sa.Column("charges", sa.Numeric(12, 2), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_mutual_fund_transactions_user_id", "mutual_fund_transactions", ["user_id"])
    op.create_index("ix_mutual_fund_transactions_date", "mutual_fund_transactions", ["date"])
    op.create_index("idx_fund_user_name", "mutual_fund_transactions", ["user_id", "fund_name"])

    op.create_table(
        "rate_settings",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("metal", metal_enum, nullable=False),
        sa.Column("value", sa.Numeric(12, 2), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("user_id", "metal", name="uq_rate_user_metal"),
    )
    op.create_index("ix_rate_settings_user_id", "rate_settings", ["user_id"])


def downgrade() -> None:
    op.drop_table("rate_settings")
    op.drop_table("mutual_fund_transactions")
    op.drop_table("stock_transactions")
    op.drop_table("recurring_deposits")
    op.drop_table("fixed_deposits")
    op.drop_table("metal_transactions")
