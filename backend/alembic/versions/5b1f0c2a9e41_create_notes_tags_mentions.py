"""Create notes, tags, mentions and junction tables

Revision ID: 5b1f0c2a9e41
Revises:
Create Date: 2025-10-02 18:04:11.512903

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1f0c2a9e41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'notes',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('user_email', sa.String(length=320), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('length(title) >= 1', name='ck_notes_title_not_empty'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_notes_owner_created', 'notes', ['user_email', 'created_at'])

    for table in ('tags', 'mentions'):
        op.create_table(
            table,
            sa.Column('id', sa.String(length=64), nullable=False),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('user_email', sa.String(length=320), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('name', 'user_email', name=f'uq_{table}_name_user'),
        )
        op.create_index(f'ix_{table}_user_email', table, ['user_email'])

    op.create_table(
        'note_tags',
        sa.Column('note_id', sa.String(length=64), nullable=False),
        sa.Column('tag_id', sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(['note_id'], ['notes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tag_id'], ['tags.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('note_id', 'tag_id'),
    )
    op.create_index('ix_note_tags_tag_id', 'note_tags', ['tag_id'])

    op.create_table(
        'note_mentions',
        sa.Column('note_id', sa.String(length=64), nullable=False),
        sa.Column('mention_id', sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(['note_id'], ['notes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['mention_id'], ['mentions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('note_id', 'mention_id'),
    )
    op.create_index('ix_note_mentions_mention_id', 'note_mentions', ['mention_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_note_mentions_mention_id', table_name='note_mentions')
    op.drop_table('note_mentions')
    op.drop_index('ix_note_tags_tag_id', table_name='note_tags')
    op.drop_table('note_tags')
    for table in ('mentions', 'tags'):
        op.drop_index(f'ix_{table}_user_email', table_name=table)
        op.drop_table(table)
    op.drop_index('idx_notes_owner_created', table_name='notes')
    op.drop_table('notes')
