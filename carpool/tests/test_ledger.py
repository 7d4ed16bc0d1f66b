import unittest

from carpool.errors.errors import InvalidInput, NotFound
from carpool.group.group import Group
from carpool.ledger.ledger import Ledger


class TestLedger(unittest.TestCase):

    def get_ledger(self):
        ledger = Ledger()
        for group_id, people in [(3, 2), (1, 6), (2, 1)]:
            ledger.enqueue({'id': group_id, 'people': people})
        return ledger

    def test_enqueue_keeps_arrival_order(self):
        ledger = self.get_ledger()
        assert [group.id for group in ledger.pending_in_arrival_order()] == [3, 1, 2]
        assert ledger.find(1).people == 6
        assert ledger.find(1).is_pending()

    def test_enqueue_group_model(self):
        ledger = Ledger()
        group = ledger.enqueue(Group(id=5, people=3, car_id=9))
        # a new journey always starts waiting
        assert group.car_id is None
        assert ledger.find(5) is group

    def test_people_out_of_range(self):
        ledger = self.get_ledger()
        for people in (0, 7, -1):
            with self.assertRaises(InvalidInput) as ctx:
                ledger.enqueue({'id': 10, 'people': people})
            assert ctx.exception.field == 'people'
            assert ctx.exception.entity_id == 10
        assert len(ledger) == 3

    def test_duplicate_id_is_rejected(self):
        ledger = self.get_ledger()
        with self.assertRaises(InvalidInput) as ctx:
            ledger.enqueue({'id': 1, 'people': 2})
        assert ctx.exception.field == 'id'
        assert len(ledger) == 3
        assert ledger.find(1).people == 6

    def test_missing_fields(self):
        ledger = Ledger()
        for record in ({'id': 1}, {'people': 1}, {'id': 1, 'people': '2'}, None):
            with self.assertRaises(InvalidInput):
                ledger.enqueue(record)
        assert len(ledger) == 0

    def test_zero_id_is_missing(self):
        ledger = self.get_ledger()
        with self.assertRaises(InvalidInput) as ctx:
            ledger.enqueue({'id': 0, 'people': 2})
        assert ctx.exception.field == 'id'
        assert len(ledger) == 3
        assert ledger.find(0) is None

    def test_remove(self):
        ledger = self.get_ledger()
        group = ledger.remove(1)
        assert group.id == 1
        assert ledger.find(1) is None
        assert [group.id for group in ledger.pending_in_arrival_order()] == [3, 2]

        with self.assertRaises(NotFound) as ctx:
            ledger.remove(1)
        assert ctx.exception.entity_id == 1

    def test_pending_skips_seated_groups(self):
        ledger = self.get_ledger()
        ledger.find(3).car_id = 100
        assert [group.id for group in ledger.pending_in_arrival_order()] == [1, 2]
        assert [group.id for group in ledger.assigned_to(100)] == [3]

    def test_replace_all(self):
        ledger = self.get_ledger()
        ledger.replace_all()
        assert len(ledger) == 0
        assert ledger.find(3) is None
