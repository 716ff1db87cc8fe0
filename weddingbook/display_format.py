# display_format.py
"""
Text formatting helpers shared by the details panel and the contact list
"""

from weddingbook.constants import MISSING_LINKED_DATE
from weddingbook.models import PersonType


def name_and_partner(person):
    """Clients show as 'Name & Partner', vendors by their plain name"""
    if person.type == PersonType.CLIENT and person.partner_name:
        return f"{person.name} & {person.partner_name}"
    return person.name


def format_amount(amount):
    """Format a monetary amount, e.g. Decimal('1234.5') -> '$1,234.50'"""
    return f"${amount:,.2f}"


def format_date(value):
    return value.isoformat()


def format_phone(raw):
    # Shown exactly as entered
    return raw


def linked_date_prefix(person):
    """Wedding date of a linked client, or an em-dash when unknown"""
    if person.wedding_date is None:
        return MISSING_LINKED_DATE
    return format_date(person.wedding_date)
