"""
Static criteria catalogs and reference lists.

A ``SectionCatalog`` is the seed content of one compliance grid:

    parts   ((part_code, title, description), ...)
    rows    ((part_code, code, text), ...)

``row_text_field`` names the row attribute that receives ``text``: Quality
Assurance criteria are evidence items (``action``), Training QA criteria are
requirements (``requirement``).
"""

from typing import NamedTuple


class SectionCatalog(NamedTuple):
    key: str
    title: str
    parts: tuple
    rows: tuple
    row_text_field: str = "action"
