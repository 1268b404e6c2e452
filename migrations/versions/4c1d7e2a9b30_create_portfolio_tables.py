"""create_portfolio_tables

Revision ID: 4c1d7e2a9b30
Revises:
Create Date: 2026-10-19 10:12:05.413207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4c1d7e2a9b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profile, skills, projects and contact_messages tables."""
    op.create_table('portfolio_profile',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('profession', sa.String(length=255), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        sa.Column('contact_number', sa.String(length=50), nullable=True),
        sa.Column('father_name', sa.String(length=255), nullable=True),
        sa.Column('profile_image_id', sa.String(length=500), nullable=True),
        sa.Column('social_links', postgresql.JSONB(astext_type=sa.Text()), nullable=False,
                  server_default=sa.text("'{}'::jsonb")),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('id = 1', name='ck_portfolio_profile_singleton'),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('skills',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('level', sa.Integer(), nullable=False),
        sa.Column('icon', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_skills_category', 'skills', ['category'], unique=False)

    op.create_table('projects',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('thumbnail_id', sa.String(length=500), nullable=True),
        sa.Column('media_id', sa.String(length=500), nullable=True),
        sa.Column('tags', postgresql.JSONB(astext_type=sa.Text()), nullable=False,
                  server_default=sa.text("'[]'::jsonb")),
        sa.Column('featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint("category IN ('video', 'music', 'graphics')", name='ck_projects_category'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_projects_created_at', 'projects', ['created_at'], unique=False)
    op.create_index('ix_projects_category_created', 'projects', ['category', 'created_at'], unique=False)
    op.create_index('ix_projects_featured_created', 'projects', ['featured', 'created_at'], unique=False)

    op.create_table('contact_messages',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_contact_messages_read', 'contact_messages', ['read'], unique=False)
    op.create_index('ix_contact_messages_created_at', 'contact_messages', ['created_at'], unique=False)

    # The API connects with the service role, which bypasses RLS. Enabling it
    # keeps the tables closed to the anon key exposed by Supabase.
    for table in ('portfolio_profile', 'skills', 'projects', 'contact_messages'):
        op.execute(f"ALTER TABLE {table} ENABLE ROW LEVEL SECURITY;")

    for table in ('portfolio_profile', 'skills', 'projects'):
        op.execute(f"""
            CREATE POLICY {table}_public_select ON {table}
                FOR SELECT USING (true);
        """)


def downgrade() -> None:
    """Drop portfolio tables."""
    for table in ('portfolio_profile', 'skills', 'projects'):
        op.execute(f"DROP POLICY IF EXISTS {table}_public_select ON {table};")

    op.drop_index('ix_contact_messages_created_at', table_name='contact_messages')
    op.drop_index('ix_contact_messages_read', table_name='contact_messages')
    op.drop_table('contact_messages')

    op.drop_index('ix_projects_featured_created', table_name='projects')
    op.drop_index('ix_projects_category_created', table_name='projects')
    op.drop_index('ix_projects_created_at', table_name='projects')
    op.drop_table('projects')

    op.drop_index('ix_skills_category', table_name='skills')
    op.drop_table('skills')

    op.drop_table('portfolio_profile')
