"""
Local Library Catalog — Form Schemas
=======================================

What:  The WTForms classes of every create/update page.
Why:   A form validates a submission field by field, in declaration order,
       and yields the sanitized submission model (app/schemas/submissions.py)
       that the services persist and the templates re-render.
How:   Build a form from the submitted FormData, load the choices of its
       select fields (Book, BookInstance) from storage, call validate(),
       then read field_errors() or submission().
"""

from typing import Iterable

from wtforms import StringField, TextAreaField
from wtforms.validators import AnyOf, Length, Optional, Regexp

from app.models.book_instance import BookInstanceStatus
from app.projections import author_name
from app.schemas.submissions import AuthorData, BookData, BookInstanceData, GenreData
from app.validation import (
    CatalogForm,
    ChoiceField,
    IsoDateField,
    MultiChoiceField,
    escaped,
    strip,
)

STATUS_CHOICES = [status.value for status in BookInstanceStatus]

_ALPHANUMERIC = r"^[A-Za-z0-9]+$"


class AuthorForm(CatalogForm):
    first_name = StringField(
        "First Name",
        filters=[strip],
        validators=[
            Length(min=1, message="First name must be specified"),
            Regexp(_ALPHANUMERIC, message="First name has non-alphanumeric characters"),
        ],
    )
    last_name = StringField(
        "Last Name",
        filters=[strip],
        validators=[
            Length(min=1, message="Last name must be specified"),
            Regexp(_ALPHANUMERIC, message="Last name has non-alphanumeric characters"),
        ],
    )
    date_of_birth = IsoDateField(
        "Date of birth", [Optional()], invalid_message="Invalid date of birth"
    )
    date_of_death = IsoDateField(
        "Date of death", [Optional()], invalid_message="Invalid date of death"
    )

    def submission(self) -> AuthorData:
        return AuthorData(
            first_name=escaped(self.first_name.data),
            last_name=escaped(self.last_name.data),
            date_of_birth=self.date_of_birth.data,
            date_of_death=self.date_of_death.data,
        )


class BookForm(CatalogForm):
    """Shared by book create and update. Call load_choices() before validate()."""

    title = StringField(
        "Title", filters=[strip], validators=[Length(min=1, message="Title must not be empty.")]
    )
    author = ChoiceField(
        "Author",
        filters=[strip],
        validators=[Length(min=1, message="Author must not be empty.")],
        choice_message="Author must be chosen from the list.",
    )
    summary = TextAreaField(
        "Summary", filters=[strip], validators=[Length(min=1, message="Summary must not be empty.")]
    )
    isbn = StringField(
        "ISBN", filters=[strip], validators=[Length(min=1, message="ISBN must not be empty.")]
    )
    genre = MultiChoiceField("Genre", choice_message="Genre must be chosen from the list.")

    def load_choices(self, authors: Iterable, genres: Iterable) -> "BookForm":
        self.author.choices = [(str(a.id), author_name(a)) for a in authors]
        self.genre.choices = [(str(g.id), g.name) for g in genres]
        return self

    def submission(self) -> BookData:
        return BookData(
            title=escaped(self.title.data),
            author=escaped(self.author.data),
            summary=escaped(self.summary.data),
            isbn=escaped(self.isbn.data),
            genre=[escaped(g) for g in self.genre.data or []],
        )


class GenreForm(CatalogForm):
    name = StringField(
        "Genre",
        filters=[strip],
        validators=[Length(min=3, message="Genre name must contain at least 3 characters")],
    )

    def submission(self) -> GenreData:
        return GenreData(name=escaped(self.name.data))


class BookInstanceForm(CatalogForm):
    """Call load_choices() with the stored books before validate()."""

    book = ChoiceField(
        "Book",
        filters=[strip],
        validators=[Length(min=1, message="Book must be specified")],
        choice_message="Book must be chosen from the list.",
    )
    imprint = StringField(
        "Imprint", filters=[strip], validators=[Length(min=1, message="Imprint must be specified")]
    )
    status = StringField(
        "Status",
        default=BookInstanceStatus.MAINTENANCE.value,
        filters=[strip],
        validators=[AnyOf(STATUS_CHOICES, message="Status must be one of: %(values)s")],
    )
    due_back = IsoDateField("Date when book available", [Optional()])

    def load_choices(self, books: Iterable) -> "BookInstanceForm":
        self.book.choices = [(str(b.id), b.title) for b in books]
        return self

    def submission(self) -> BookInstanceData:
        return BookInstanceData(
            book=escaped(self.book.data),
            imprint=escaped(self.imprint.data),
            status=escaped(self.status.data),
            due_back=self.due_back.data,
        )
