"""create debts and transactions

Revision ID: 5c1e7a2b9d40
Revises:
Create Date: 2025-09-14 18:02:11.408215

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1e7a2b9d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

debt_type = sa.Enum('me_deben', 'yo_debo', name='debttype')
transaction_kind = sa.Enum('creacion', 'aumento', 'pago', 'pago_total', name='transactionkind')


def upgrade():
    op.create_table(
        'debts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('person', sa.String(), nullable=False),
        sa.Column('type', debt_type, nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_debts_person', 'debts', ['person'])
    op.create_index('ix_debts_type', 'debts', ['type'])

    # debt_id sin foreign key: el historial sobrevive al borrado de la deuda
    op.create_table(
        'transactions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('debt_id', sa.Integer(), nullable=False),
        sa.Column('kind', transaction_kind, nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('note', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_transactions_debt_id', 'transactions', ['debt_id'])


def downgrade():
    op.drop_index('ix_transactions_debt_id', table_name='transactions')
    op.drop_table('transactions')
    op.drop_index('ix_debts_type', table_name='debts')
    op.drop_index('ix_debts_person', table_name='debts')
    op.drop_table('debts')
    transaction_kind.drop(op.get_bind(), checkfirst=True)
    debt_type.drop(op.get_bind(), checkfirst=True)
