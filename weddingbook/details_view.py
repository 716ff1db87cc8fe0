# details_view.py
"""
Details view for the selected contact.

DetailsView turns a Person (or no selection) into the text and visibility of
a fixed set of display fields. It writes into a field sink: any object with
``set_text(field, text)`` and ``set_visible(field, visible)``. A hidden field
must not reserve layout space. ``FieldStates`` is the in-memory sink used for
PNG export and tests; ``PersonDetailsPanel`` is the tkinter one.
"""

import logging

from weddingbook.constants import (
    EMPTY_PLACEHOLDER, PHONE_PREFIX, EMAIL_PREFIX, ADDRESS_PREFIX, TYPE_PREFIX,
    WEDDING_PREFIX, PRICE_PREFIX, BUDGET_PREFIX, TAGS_PREFIX, BULLET,
    MISSING_WEDDING_DATE,
)
from weddingbook.display_format import (
    name_and_partner, format_amount, format_date, format_phone, linked_date_prefix,
)
from weddingbook.models import PersonType

logger = logging.getLogger(__name__)

# Display fields, in panel order
NAME = "name"
PHONE = "phone"
EMAIL = "email"
ADDRESS = "address"
TYPE = "type"
WEDDING_DATE = "weddingDate"
PRICE = "price"
BUDGET = "budget"
TAGS_LINE = "tagsLine"
LINKED_PERSONS_LINE = "linkedPersonsLine"

DISPLAY_FIELDS = (
    NAME, PHONE, EMAIL, ADDRESS, TYPE, WEDDING_DATE,
    PRICE, BUDGET, TAGS_LINE, LINKED_PERSONS_LINE,
)

# Fields shown for every selected person
ALWAYS_VISIBLE = (NAME, PHONE, EMAIL, ADDRESS, TYPE)
# Fields hidden while nothing is selected
OPTIONAL_FIELDS = (PRICE, BUDGET, TAGS_LINE, LINKED_PERSONS_LINE)


class FieldState:
    """Text and visibility of one display field"""
    def __init__(self, text="", visible=True):
        self.text = text
        self.visible = visible

    def __repr__(self):
        return f"FieldState(text={self.text!r}, visible={self.visible})"

    def __eq__(self, other):
        if not isinstance(other, FieldState):
            return NotImplemented
        return (self.text, self.visible) == (other.text, other.visible)


class FieldStates:
    """
    In-memory field sink: a record of field -> FieldState
    """
    def __init__(self):
        self.fields = {field: FieldState() for field in DISPLAY_FIELDS}

    def __getitem__(self, field):
        return self.fields[field]

    def set_text(self, field, text):
        self.fields[field].text = text

    def set_visible(self, field, visible):
        self.fields[field].visible = visible

    def visible_lines(self):
        """(field, text) pairs of the visible, non-empty fields in panel order"""
        return [(field, self.fields[field].text) for field in DISPLAY_FIELDS
                if self.fields[field].visible and self.fields[field].text]


class NoSelection:
    """Nothing is selected; the panel shows its placeholder"""
    person = None

    def __repr__(self):
        return "NoSelection()"

    def __eq__(self, other):
        return isinstance(other, NoSelection)


class Selected:
    """A person is selected"""
    def __init__(self, person):
        self.person = person

    def __repr__(self):
        return f"Selected({self.person!r})"

    def __eq__(self, other):
        return isinstance(other, Selected) and other.person is self.person


def selection_for(person):
    """Wrap an optional person into NoSelection or Selected"""
    if person is None:
        return NoSelection()
    return Selected(person)


def linked_persons_text(person):
    """
    Build the linked persons block for the selected person.

    Linked persons are sorted by name. A vendor looking at a client sees the
    client's wedding date as the line prefix; every other pairing uses the
    linked person's first tag, or its type label when it has no tags. The
    header is the pluralised type label of the first sorted linked person.

    Returns None when there are no linked persons.
    """
    linked = sorted(person.linked_persons, key=lambda p: p.name)
    if not linked:
        return None

    lines = []
    for p in linked:
        if person.type == PersonType.VENDOR and p.type == PersonType.CLIENT:
            prefix = linked_date_prefix(p)
        elif p.tags:
            prefix = sorted(p.tags)[0]
        else:
            prefix = p.type.display()

        if p.type == PersonType.CLIENT:
            display_name = name_and_partner(p)
        else:
            display_name = p.name

        lines.append(f"{BULLET}{prefix}: {display_name} ({format_phone(p.phone)})")

    header = linked[0].type.display() + "s"
    return header + ":\n" + "\n".join(lines)


class DetailsView:
    """
    Keeps the display fields of the details panel in sync with the selection.

    Args:
        fields: field sink to write into, defaults to the view's own FieldStates
        amount_formatter: callable turning a price or budget into text
    """
    def __init__(self, fields=None, amount_formatter=format_amount):
        self.states = FieldStates()  # Last rendered state, whatever the sink
        self.fields = fields if fields is not None else self.states
        self.amount_formatter = amount_formatter
        self.selection = NoSelection()
        self.show(self.selection)

    def render(self, person):
        """Show the given person, or the empty state when person is None"""
        self.show(selection_for(person))

    def show(self, selection):
        self.selection = selection
        if isinstance(selection, Selected):
            logger.debug(f"Showing details for '{selection.person.name}'")
            self._show_person(selection.person)
        else:
            logger.debug("Showing empty details state")
            self._show_empty()

    def text(self, field):
        return self.states[field].text

    def is_visible(self, field):
        return self.states[field].visible

    def _set(self, field, text, visible=True):
        text = text if visible else ""
        self.states.set_text(field, text)
        self.states.set_visible(field, visible)
        if self.fields is not self.states:
            self.fields.set_text(field, text)
            self.fields.set_visible(field, visible)

    def _show_empty(self):
        self._set(NAME, EMPTY_PLACEHOLDER)
        for field in (PHONE, EMAIL, ADDRESS, TYPE, WEDDING_DATE):
            self._set(field, "")
        for field in OPTIONAL_FIELDS:
            self._set(field, "", visible=False)

    def _show_person(self, person):
        self._set(NAME, name_and_partner(person))
        self._set(PHONE, PHONE_PREFIX + person.phone)
        self._set(EMAIL, EMAIL_PREFIX + person.email)
        self._set(ADDRESS, ADDRESS_PREFIX + person.address)
        self._set(TYPE, TYPE_PREFIX + person.type.display())

        if person.type == PersonType.VENDOR:
            self._set(WEDDING_DATE, "", visible=False)
        else:
            if person.wedding_date is not None:
                wedding_text = format_date(person.wedding_date)
            else:
                wedding_text = MISSING_WEDDING_DATE
            self._set(WEDDING_DATE, WEDDING_PREFIX + wedding_text)

        if person.price is not None:
            self._set(PRICE, PRICE_PREFIX + self.amount_formatter(person.price))
        else:
            self._set(PRICE, "", visible=False)

        if person.budget is not None:
            self._set(BUDGET, BUDGET_PREFIX + self.amount_formatter(person.budget))
        else:
            self._set(BUDGET, "", visible=False)

        # Tags are only listed for vendors
        if person.type == PersonType.CLIENT or not person.tags:
            self._set(TAGS_LINE, "", visible=False)
        else:
            self._set(TAGS_LINE, TAGS_PREFIX + ", ".join(sorted(person.tags)))

        linked_text = linked_persons_text(person)
        if linked_text is None:
            self._set(LINKED_PERSONS_LINE, "", visible=False)
        else:
            self._set(LINKED_PERSONS_LINE, linked_text)
