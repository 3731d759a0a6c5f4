"""
Local Library Catalog — Form Building Blocks
===============================================

What:  The WTForms pieces shared by the catalog forms (app/schemas/forms.py):
       filters, fields and the error model rendered above a form.
Why:   Create/update pages must show *every* problem with the submission at
       once, in field order, and must store sanitized values.
How:   Trimming happens in field filters, before any validator runs.
       Length and Regexp raise ValidationError, which does not stop the
       field's chain, so an empty name reports both "must be specified" and
       "non-alphanumeric". Escaping is applied when a validated form is
       turned into its submission model.

Multi-valued fields:
    Browsers send a repeated key once per checked box, and not at all when
    nothing is checked. as_list() is the first filter of such a field, so
    its data is always a list.
"""

import uuid
from typing import Any, List, Optional

from markupsafe import escape
from pydantic import BaseModel
from wtforms import DateField, Form, SelectField, SelectMultipleField
from wtforms.validators import ValidationError

ISO_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M"]


class FieldError(BaseModel):
    """One failed rule: rendered as a bullet above the form."""
    field: str
    msg: str
    value: Any = None


# ══════════════════════════════════════════════════════════════════════════
# Filters
# ══════════════════════════════════════════════════════════════════════════

def as_list(value: Any) -> List[Any]:
    """
    Normalize an untyped form value to a list.

    absent (None) → [], a list → itself, anything else → [value].
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def strip_each(values: List[Any]) -> List[Any]:
    return [strip(v) for v in values]


def escaped(value: Optional[str]) -> str:
    """Replace markup-significant characters (& < > " ') with entities."""
    return str(escape(value or ""))


def parse_identifier(value: Any) -> Optional[uuid.UUID]:
    """Opaque record identifier from a path or form value; None when malformed."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


# ══════════════════════════════════════════════════════════════════════════
# Fields
# ══════════════════════════════════════════════════════════════════════════

class IsoDateField(DateField):
    """
    ISO-8601 calendar date (a date-time is truncated to its date).

    A value that does not parse is reported with `invalid_message`; pair
    with Optional() so that an empty input is no error at all.
    """

    def __init__(self, label=None, validators=None, invalid_message="Invalid date", **kwargs):
        super().__init__(label, validators, format=ISO_DATE_FORMATS, **kwargs)
        self.invalid_message = invalid_message

    def process_formdata(self, valuelist):
        try:
            super().process_formdata(valuelist)
        except ValueError:
            raise ValueError(self.invalid_message) from None


def _choice_values(choices) -> set:
    return {str(value) for value, _label in choices or ()}


class ChoiceField(SelectField):
    """
    Select whose value must be one of the choices loaded for this request.

    Handlers fill `choices` from storage before validating. An empty value
    is left to the field's own validators (Length).
    """

    def __init__(self, label=None, validators=None, choice_message="Not a valid choice.", **kwargs):
        kwargs.setdefault("choices", [])
        super().__init__(label, validators, **kwargs)
        self.choice_message = choice_message

    def pre_validate(self, form):
        if self.data and self.data not in _choice_values(self.choices):
            raise ValidationError(self.choice_message)


class MultiChoiceField(SelectMultipleField):
    """Checkbox group: every checked value must be one of the loaded choices."""

    def __init__(self, label=None, validators=None, choice_message="Not a valid choice.", **kwargs):
        kwargs.setdefault("choices", [])
        kwargs.setdefault("filters", [as_list, strip_each])
        super().__init__(label, validators, **kwargs)
        self.choice_message = choice_message

    def pre_validate(self, form):
        allowed = _choice_values(self.choices)
        if any(value not in allowed for value in self.data or []):
            raise ValidationError(self.choice_message)


# ══════════════════════════════════════════════════════════════════════════
# Forms
# ══════════════════════════════════════════════════════════════════════════

class CatalogForm(Form):
    """Base of the catalog forms: errors flattened in field order."""

    def field_errors(self) -> List[FieldError]:
        return [
            FieldError(field=field.name, msg=message, value=field.data)
            for field in self
            for message in field.errors
        ]
