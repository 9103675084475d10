"""create snapshot table

Revision ID: 3c9d2e7a41b0
Revises:
Create Date: 2026-10-18 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9d2e7a41b0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'snapshot' in set(insp.get_table_names()):
        return
    op.create_table(
        'snapshot',
        sa.Column('key', sa.String(length=64), primary_key=True),
        sa.Column('payload', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.Float(), nullable=False),
    )


def downgrade():
    op.drop_table('snapshot')
