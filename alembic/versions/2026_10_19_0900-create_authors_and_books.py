"""create authors and books

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
import uuid
from datetime import UTC, datetime
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b64'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

GEORGE_RR_MARTIN = uuid.UUID('d28888e9-2ba9-473a-a40f-e38cb54f9b35')
STEPHEN_FRY = uuid.UUID('da2fd609-d754-4feb-8acd-c4f9ff13ba96')
JAMES_ELLROY = uuid.UUID('24810dfc-2d94-4cc7-aab5-cdf98b83f0c9')
DOUGLAS_ADAMS = uuid.UUID('2902b665-1190-4c70-9915-b9c2d7680450')


def upgrade() -> None:
    """Upgrade schema."""
    authors = op.create_table(
        'authors',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(length=150), nullable=False),
        sa.Column('last_name', sa.String(length=150), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    books = op.create_table(
        'books',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=150), nullable=False),
        sa.Column('description', sa.String(length=2500), nullable=True),
        sa.Column('amount_of_pages', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_books_author_id', 'books', ['author_id'])

    # Sample library
    now = datetime.now(UTC)
    op.bulk_insert(authors, [
        {'id': GEORGE_RR_MARTIN, 'first_name': 'George', 'last_name': 'RR Martin', 'created_at': now, 'updated_at': now},
        {'id': STEPHEN_FRY, 'first_name': 'Stephen', 'last_name': 'Fry', 'created_at': now, 'updated_at': now},
        {'id': JAMES_ELLROY, 'first_name': 'James', 'last_name': 'Ellroy', 'created_at': now, 'updated_at': now},
        {'id': DOUGLAS_ADAMS, 'first_name': 'Douglas', 'last_name': 'Adams', 'created_at': now, 'updated_at': now},
    ])
    op.bulk_insert(books, [
        {
            'id': uuid.UUID('5b1c2b4d-48c7-402a-80c3-cc796ad49c6b'),
            'author_id': GEORGE_RR_MARTIN,
            'title': 'The Winds of Winter',
            'description': 'The book that seems impossible to write.',
            'amount_of_pages': None,
            'created_at': now,
        },
        {
            'id': uuid.UUID('d8663e5e-7494-4f81-8739-6e0de1bea7ee'),
            'author_id': GEORGE_RR_MARTIN,
            'title': 'A Game of Thrones',
            'description': 'The first novel in A Song of Ice and Fire.',
            'amount_of_pages': 694,
            'created_at': now,
        },
        {
            'id': uuid.UUID('d173e20d-159e-4127-9ce9-b0ac2564ad97'),
            'author_id': STEPHEN_FRY,
            'title': 'Mythos',
            'description': 'The Greek myths are amongst the best stories ever told.',
            'amount_of_pages': 416,
            'created_at': now,
        },
        {
            'id': uuid.UUID('493c3228-3444-4a49-9cc0-e8532edc59b2'),
            'author_id': JAMES_ELLROY,
            'title': 'American Tabloid',
            'description': 'A 1995 crime novel set between 1958 and 1963.',
            'amount_of_pages': 592,
            'created_at': now,
        },
        {
            'id': uuid.UUID('40ff5488-fdab-45b5-bc3a-14302d59869a'),
            'author_id': DOUGLAS_ADAMS,
            'title': "The Hitchhiker's Guide to the Galaxy",
            'description': 'A comic science fiction series that began as a radio comedy.',
            'amount_of_pages': 224,
            'created_at': now,
        },
    ])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_books_author_id', table_name='books')
    op.drop_table('books')
    op.drop_table('authors')
