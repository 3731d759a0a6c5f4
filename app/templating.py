"""
Jinja2 environment for the server-rendered pages.

The projection functions are registered as globals so templates compute
derived values the same way handlers do: {{ author_name(author) }},
{{ url(book) }}, {{ format_date(instance.due_back) }}.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from app import projections

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

templates.env.globals.update(
    url=projections.entity_url,
    author_name=projections.author_name,
    author_lifespan=projections.author_lifespan,
    format_date=projections.format_date,
    date_of_birth_formatted=projections.date_of_birth_formatted,
    date_of_death_formatted=projections.date_of_death_formatted,
    due_back_formatted=projections.due_back_formatted,
)
