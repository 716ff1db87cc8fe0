# models.py
"""
Data models for the WeddingBook address book
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum

logger = logging.getLogger(__name__)


class PersonType(Enum):
    """
    Kind of contact: a couple getting married or a vendor serving them
    """
    CLIENT = "client"
    VENDOR = "vendor"

    def display(self):
        """Human readable label, e.g. 'Client'"""
        return self.value.capitalize()

    @classmethod
    def from_string(cls, value):
        """Parse a type name case-insensitively"""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown person type: {value!r}") from None


def _parse_date(value):
    if not value:
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _list_field(data, key, name):
    value = data.get(key)
    if value is None and key not in data:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' of '{name}' must be a list, got {value!r}")
    return value


def _parse_amount(value):
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}") from None


class Person:
    """
    Represents a client or vendor in the address book
    """
    def __init__(self, name, phone="", email="", address="", type=PersonType.CLIENT,
                 partner_name=None, wedding_date=None, price=None, budget=None, tags=None):
        self.name = name
        self.partner_name = partner_name
        self.phone = phone
        self.email = email
        self.address = address
        self.type = type
        self.wedding_date = wedding_date
        self.price = price
        self.budget = budget
        self.tags = set(tags or ())
        self.linked_persons = []  # Back-references, never owned

    def __repr__(self):
        return f"Person(name='{self.name}', type={self.type.name}, links={len(self.linked_persons)})"

    def link(self, other):
        """Link two persons to each other"""
        if other is self:
            raise ValueError(f"Cannot link '{self.name}' to themself")
        if other not in self.linked_persons:
            self.linked_persons.append(other)
        if self not in other.linked_persons:
            other.linked_persons.append(self)

    def unlink(self, other):
        """Remove the link between two persons, if any"""
        if other in self.linked_persons:
            self.linked_persons.remove(other)
        if self in other.linked_persons:
            other.linked_persons.remove(self)

    def is_linked_to(self, other):
        """Check if linked to another person"""
        return other in self.linked_persons

    def to_dict(self):
        """Convert to dictionary for serialization"""
        return {
            'name': self.name,
            'partner_name': self.partner_name,
            'phone': self.phone,
            'email': self.email,
            'address': self.address,
            'type': self.type.value,
            'wedding_date': self.wedding_date.isoformat() if self.wedding_date else None,
            'price': str(self.price) if self.price is not None else None,
            'budget': str(self.budget) if self.budget is not None else None,
            'tags': sorted(self.tags),
            'linked': sorted(p.name for p in self.linked_persons),
        }

    @classmethod
    def from_dict(cls, data):
        """Create Person from dictionary (links are restored by AddressBook)"""
        if not isinstance(data, dict):
            raise ValueError(f"Person record must be an object, got {data!r}")
        name = (data.get('name') or '').strip()
        if not name:
            raise ValueError("Person record without a name")
        try:
            wedding_date = _parse_date(data.get('wedding_date'))
        except ValueError:
            raise ValueError(f"Invalid wedding date for '{name}': {data.get('wedding_date')!r}") from None
        return cls(
            name=name,
            partner_name=data.get('partner_name') or None,
            phone=str(data.get('phone') or ''),
            email=str(data.get('email') or ''),
            address=str(data.get('address') or ''),
            type=PersonType.from_string(data.get('type', 'client')),
            wedding_date=wedding_date,
            price=_parse_amount(data.get('price')),
            budget=_parse_amount(data.get('budget')),
            tags=_list_field(data, 'tags', name),
        )


class AddressBook:
    """
    All persons known to the application, keyed by name
    """
    FORMAT_VERSION = 1

    def __init__(self, persons=None):
        self._persons = {}  # {name: Person}
        for person in persons or ():
            self.add(person)

    def __len__(self):
        return len(self._persons)

    def __contains__(self, name):
        return name in self._persons

    def add(self, person):
        if person.name in self._persons:
            raise ValueError(f"Duplicate person: '{person.name}'")
        self._persons[person.name] = person
        return person

    def get(self, name):
        return self._persons.get(name)

    def remove(self, name):
        """Remove a person and every link pointing at them"""
        person = self._persons.pop(name)
        for other in list(person.linked_persons):
            person.unlink(other)
        return person

    def link(self, name_a, name_b):
        if name_a not in self._persons or name_b not in self._persons:
            raise KeyError(f"Cannot link unknown persons: '{name_a}', '{name_b}'")
        self._persons[name_a].link(self._persons[name_b])

    def persons(self):
        """All persons sorted by name"""
        return [self._persons[name] for name in sorted(self._persons)]

    def to_dict(self):
        return {
            'version': self.FORMAT_VERSION,
            'persons': [p.to_dict() for p in self.persons()],
        }

    @classmethod
    def from_dict(cls, data):
        records = data.get('persons')
        if not isinstance(records, list):
            raise ValueError("Address book data has no 'persons' list")

        book = cls()
        for record in records:
            book.add(Person.from_dict(record))

        for record in records:
            for linked_name in _list_field(record, 'linked', record['name']):
                if linked_name not in book:
                    logger.warning(f"Link from '{record['name']}' references missing person: {linked_name}")
                    continue
                book.link(record['name'].strip(), linked_name)

        logger.info(f"Loaded address book with {len(book)} persons")
        return book
