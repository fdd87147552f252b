"""Tests for CategoryTable totality and immutability."""

import pytest

from pysortie.classes.enums import AirDefenseRange, Amount, AmountN
from pysortie.database.tables import CategoryTable
from pysortie.database.validation import MissingCategoryMemberError


class TestTotality:
    def test_build_reads_every_member_in_order(self):
        seen = []

        def read(member):
            seen.append(member)
            return member.ordinal * 10

        table = CategoryTable.build(AmountN, read)
        assert seen == list(AmountN)
        assert table.values_list() == [0, 10, 20, 30, 40, 50]
        assert len(table) == 6

    def test_missing_member_rejected(self):
        values = {AirDefenseRange.SHORT: 1, AirDefenseRange.MEDIUM: 2}
        with pytest.raises(MissingCategoryMemberError, match="Long"):
            CategoryTable(AirDefenseRange, values)

    def test_foreign_key_rejected(self):
        values = {level: 0 for level in Amount}
        values[AmountN.NONE] = 0
        with pytest.raises(TypeError):
            CategoryTable(Amount, values)

    def test_iteration_follows_ordinal_order(self):
        values = {level: level.key for level in reversed(list(Amount))}
        table = CategoryTable(Amount, values)
        assert list(table) == list(Amount)


class TestImmutability:
    @pytest.fixture
    def table(self):
        return CategoryTable.build(AirDefenseRange, lambda tier: tier.key)

    def test_item_assignment_not_supported(self, table):
        with pytest.raises(TypeError):
            table[AirDefenseRange.SHORT] = "changed"

    def test_source_dict_changes_do_not_leak(self):
        values = {tier: 1 for tier in AirDefenseRange}
        table = CategoryTable(AirDefenseRange, values)
        values[AirDefenseRange.SHORT] = 99
        assert table[AirDefenseRange.SHORT] == 1

    def test_no_new_attributes(self, table):
        with pytest.raises(AttributeError):
            table.extra = 1

    def test_mapping_behaviour(self, table):
        assert table.category is AirDefenseRange
        assert table.get(AirDefenseRange.LONG) == "Long"
        assert dict(table) == {tier: tier.key for tier in AirDefenseRange}
        assert "Medium" in repr(table)
