"""Create catalog tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates authors, genres, books, book_genres and book_instances.
How:   Generic SQLAlchemy types only (Uuid, Date), so the same revision runs
       on PostgreSQL and SQLite.

Rollback: downgrade() drops all five tables (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("date_of_death", sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_authors_last_name", "authors", ["last_name"])

    # No unique constraint on name: duplicates are avoided by a lookup on create
    op.create_table(
        "genres",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_genres_name", "genres", ["name"])

    op.create_table(
        "books",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("isbn", sa.String(32), nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["authors.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_books_title", "books", ["title"])
    op.create_index("idx_books_author_id", "books", ["author_id"])

    op.create_table(
        "book_genres",
        sa.Column("book_id", sa.Uuid(), nullable=False),
        sa.Column("genre_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["book_id"], ["books.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["genre_id"], ["genres.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("book_id", "genre_id"),
    )

    op.create_table(
        "book_instances",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("book_id", sa.Uuid(), nullable=False),
        sa.Column("imprint", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("due_back", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["book_id"], ["books.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_book_instances_book_id", "book_instances", ["book_id"])
    op.create_index("idx_book_instances_status", "book_instances", ["status"])


def downgrade() -> None:
    op.drop_table("book_instances")
    op.drop_table("book_genres")
    op.drop_index("idx_books_author_id", table_name="books")
    op.drop_index("idx_books_title", table_name="books")
    op.drop_table("books")
    op.drop_index("idx_genres_name", table_name="genres")
    op.drop_table("genres")
    op.drop_index("idx_authors_last_name", table_name="authors")
    op.drop_table("authors")
