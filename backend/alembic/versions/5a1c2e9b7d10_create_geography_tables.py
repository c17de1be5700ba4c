"""create chat_messages and geography_topics

Revision ID: 5a1c2e9b7d10
Revises:
Create Date: 2026-10-19 10:12:31.402117
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '5a1c2e9b7d10'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'chat_messages',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('owner_id', sa.String(), nullable=False),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('topic', sa.String(), nullable=True),
        sa.Column('difficulty', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_chat_messages_id', 'chat_messages', ['id'])
    op.create_index('ix_chat_messages_owner_id', 'chat_messages', ['owner_id'])

    op.create_table(
        'geography_topics',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('difficulty', sa.String(), nullable=False),
        sa.Column('sample_questions', sa.JSON(), nullable=False),
        sa.CheckConstraint(
            "difficulty IN ('easy', 'medium', 'hard')",
            name='ck_geography_topics_difficulty',
        ),
    )
    op.create_index('ix_geography_topics_id', 'geography_topics', ['id'])

def downgrade():
    op.drop_index('ix_geography_topics_id', table_name='geography_topics')
    op.drop_table('geography_topics')
    op.drop_index('ix_chat_messages_owner_id', table_name='chat_messages')
    op.drop_index('ix_chat_messages_id', table_name='chat_messages')
    op.drop_table('chat_messages')
