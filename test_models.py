#!/usr/bin/env python3
"""
Tests for persons, links and the address book
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import unittest
from datetime import date
from decimal import Decimal

from weddingbook.models import Person, PersonType, AddressBook
from weddingbook.display_format import name_and_partner, format_amount, linked_date_prefix
from weddingbook.details_view import DetailsView, PHONE


class TestPersonType(unittest.TestCase):

    def test_display(self):
        self.assertEqual(PersonType.CLIENT.display(), "Client")
        self.assertEqual(PersonType.VENDOR.display(), "Vendor")

    def test_from_string(self):
        self.assertIs(PersonType.from_string("VENDOR"), PersonType.VENDOR)
        self.assertIs(PersonType.from_string(" client "), PersonType.CLIENT)
        with self.assertRaises(ValueError):
            PersonType.from_string("guest")


class TestPerson(unittest.TestCase):
    """Test cases for Person links and serialization"""

    def setUp(self):
        self.amy = Person("Amy", "123", type=PersonType.CLIENT, partner_name="Ben",
                          wedding_date=date(2025, 5, 1), budget=Decimal("25000"))
        self.caterer = Person("Caterer Co", "999", type=PersonType.VENDOR,
                              price=Decimal("4500.00"), tags={"food", "Buffet"})

    def test_link_is_symmetric(self):
        self.amy.link(self.caterer)
        self.assertTrue(self.amy.is_linked_to(self.caterer))
        self.assertTrue(self.caterer.is_linked_to(self.amy))

    def test_link_twice_is_noop(self):
        self.amy.link(self.caterer)
        self.caterer.link(self.amy)
        self.assertEqual(len(self.amy.linked_persons), 1)
        self.assertEqual(len(self.caterer.linked_persons), 1)

    def test_cannot_link_to_self(self):
        with self.assertRaises(ValueError):
            self.amy.link(self.amy)

    def test_unlink(self):
        self.amy.link(self.caterer)
        self.amy.unlink(self.caterer)
        self.assertFalse(self.amy.is_linked_to(self.caterer))
        self.assertFalse(self.caterer.is_linked_to(self.amy))

    def test_to_dict(self):
        self.amy.link(self.caterer)
        data = self.caterer.to_dict()
        self.assertEqual(data['type'], 'vendor')
        self.assertEqual(data['price'], '4500.00')
        self.assertIsNone(data['budget'])
        self.assertEqual(data['tags'], ['Buffet', 'food'])
        self.assertEqual(data['linked'], ['Amy'])
        self.assertEqual(self.amy.to_dict()['wedding_date'], '2025-05-01')

    def test_from_dict(self):
        person = Person.from_dict({
            'name': 'Amy', 'partner_name': 'Ben', 'type': 'client',
            'wedding_date': '2025-05-01', 'budget': '25000', 'tags': [],
        })
        self.assertEqual(person.type, PersonType.CLIENT)
        self.assertEqual(person.wedding_date, date(2025, 5, 1))
        self.assertEqual(person.budget, Decimal('25000'))
        self.assertIsNone(person.price)
        self.assertEqual(person.phone, '')

    def test_from_dict_rejects_bad_records(self):
        with self.assertRaises(ValueError):
            Person.from_dict({'name': ''})
        with self.assertRaises(ValueError):
            Person.from_dict({'name': 'Amy', 'wedding_date': 'soon'})
        with self.assertRaises(ValueError):
            Person.from_dict({'name': 'Amy', 'budget': 'lots'})

    def test_from_dict_null_contact_fields_become_empty(self):
        person = Person.from_dict({'name': 'Amy', 'phone': None, 'email': None, 'address': None})
        self.assertEqual((person.phone, person.email, person.address), ('', '', ''))

    def test_from_dict_tags_must_be_a_list(self):
        with self.assertRaises(ValueError):
            Person.from_dict({'name': 'Caterer Co', 'type': 'vendor', 'tags': 'food'})
        person = Person.from_dict({'name': 'Caterer Co', 'type': 'vendor', 'tags': None})
        self.assertEqual(person.tags, set())

    def test_from_dict_rejects_non_object(self):
        with self.assertRaises(ValueError):
            Person.from_dict(['Amy'])


class TestDisplayFormat(unittest.TestCase):

    def test_name_and_partner(self):
        amy = Person("Amy", type=PersonType.CLIENT, partner_name="Ben")
        self.assertEqual(name_and_partner(amy), "Amy & Ben")
        vendor = Person("Caterer Co", type=PersonType.VENDOR, partner_name="Ben")
        self.assertEqual(name_and_partner(vendor), "Caterer Co")

    def test_format_amount(self):
        self.assertEqual(format_amount(Decimal("1234.5")), "$1,234.50")
        self.assertEqual(format_amount(Decimal("0")), "$0.00")

    def test_linked_date_prefix(self):
        self.assertEqual(linked_date_prefix(Person("Amy", wedding_date=date(2025, 5, 1))), "2025-05-01")
        self.assertEqual(linked_date_prefix(Person("Amy")), "—")


class TestAddressBook(unittest.TestCase):
    """Test cases for the address book"""

    def setUp(self):
        self.book = AddressBook([
            Person("Caterer Co", "999", type=PersonType.VENDOR),
            Person("Amy", "123", type=PersonType.CLIENT),
        ])

    def test_persons_sorted(self):
        self.assertEqual([p.name for p in self.book.persons()], ["Amy", "Caterer Co"])
        self.assertEqual(len(self.book), 2)
        self.assertIn("Amy", self.book)

    def test_duplicate_name(self):
        with self.assertRaises(ValueError):
            self.book.add(Person("Amy"))

    def test_link_unknown(self):
        with self.assertRaises(KeyError):
            self.book.link("Amy", "Nobody")

    def test_remove_drops_links(self):
        self.book.link("Amy", "Caterer Co")
        self.book.remove("Caterer Co")
        self.assertEqual(self.book.get("Amy").linked_persons, [])
        self.assertIsNone(self.book.get("Caterer Co"))

    def test_dict_conversion_restores_links(self):
        self.book.link("Amy", "Caterer Co")
        restored = AddressBook.from_dict(self.book.to_dict())
        amy = restored.get("Amy")
        caterer = restored.get("Caterer Co")
        self.assertTrue(amy.is_linked_to(caterer))
        self.assertEqual(len(caterer.linked_persons), 1)

    def test_missing_link_target_is_skipped(self):
        data = {'persons': [{'name': 'Amy', 'type': 'client', 'linked': ['Ghost']}]}
        with self.assertLogs('weddingbook.models', level='WARNING'):
            book = AddressBook.from_dict(data)
        self.assertEqual(book.get("Amy").linked_persons, [])

    def test_from_dict_requires_persons(self):
        with self.assertRaises(ValueError):
            AddressBook.from_dict({'version': 1})

    def test_null_contact_fields_render(self):
        book = AddressBook.from_dict({'persons': [{'name': 'Amy', 'type': 'client', 'phone': None}]})
        view = DetailsView()
        view.render(book.get("Amy"))
        self.assertEqual(view.text(PHONE), "Phone: ")

    def test_linked_must_be_a_list(self):
        with self.assertRaises(ValueError):
            AddressBook.from_dict({'persons': [{'name': 'Amy', 'linked': None}]})
        with self.assertRaises(ValueError):
            AddressBook.from_dict({'persons': [{'name': 'Amy', 'linked': 'Caterer Co'}]})


def run_tests():
    """Run all tests"""
    print("Running model tests...")
    unittest.main(verbosity=2, exit=False)

if __name__ == "__main__":
    run_tests()
