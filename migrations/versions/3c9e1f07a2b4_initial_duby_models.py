"""initial duby models

Revision ID: 3c9e1f07a2b4
Revises: 
Create Date: 2025-08-08 21:12:53.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9e1f07a2b4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=False, unique=True),
            sa.Column('password_hash', sa.String(length=255), nullable=False),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('profiles'):
        op.create_table(
            'profiles',
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), primary_key=True),
            sa.Column('height_cm', sa.Integer(), nullable=False),
            sa.Column('current_weight_kg', sa.Numeric(6, 2), nullable=False),
            sa.Column('goal_weight_kg', sa.Numeric(6, 2), nullable=False),
            sa.Column('target_date', sa.DateTime(), nullable=True),
            sa.Column('gender', sa.String(length=50), nullable=False),
            sa.Column('age', sa.Integer(), nullable=False),
            sa.Column('activity_level', sa.String(length=20), nullable=False),
            sa.Column('daily_duby_budget', sa.Integer(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('food_items'):
        op.create_table(
            'food_items',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('duby', sa.Numeric(8, 2), nullable=False, server_default='0'),
            sa.Column('unit', sa.String(length=50), nullable=False, server_default=''),
        )
        op.create_index('ix_food_items_name', 'food_items', ['name'])

    if not insp.has_table('food_logs'):
        op.create_table(
            'food_logs',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('food_item_id', sa.Integer(), sa.ForeignKey('food_items.id'), nullable=False),
            sa.Column('portion', sa.Numeric(8, 2), nullable=False, server_default='1'),
            sa.Column('occurred_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('duby_cost', sa.Numeric(10, 2), nullable=False, server_default='0'),
        )
        op.create_index('ix_food_logs_user_id', 'food_logs', ['user_id'])

    if not insp.has_table('weight_logs'):
        op.create_table(
            'weight_logs',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('weight_kg', sa.Numeric(6, 2), nullable=False),
            sa.Column('date', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_weight_logs_user_id', 'weight_logs', ['user_id'])

    if not insp.has_table('refresh_tokens'):
        op.create_table(
            'refresh_tokens',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('token_hash', sa.String(length=255), nullable=False),
            sa.Column('expires_at', sa.DateTime(), nullable=False),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )


def downgrade():
    # Drop in reverse dependency order
    for tbl in (
        'refresh_tokens',
        'weight_logs',
        'food_logs',
        'food_items',
        'profiles',
        'users',
    ):
        op.drop_table(tbl)
