"""Tests for regions, the single-chip layouter and table layout rules."""

import pytest

from primitives.errors import (
    ColumnNotInPermutation,
    ConfigurationError,
    NotEnoughRowsAvailable,
    SynthesisError,
)
from primitives.value import Value
from protocol.table import Table
from witness.layouter import SingleChipLayouter


def _layouter(frozen_cs, k=4):
    cs, config = frozen_cs
    table = Table(k, cs)
    return SingleChipLayouter(cs, table), table, config


class TestRegions:

    def test_regions_are_placed_sequentially(self, frozen_cs) -> None:
        layouter, table, config = _layouter(frozen_cs)

        def two_rows(region):
            region.assign_advice("a", config.advice[0], 0, Value.known(1))
            region.assign_advice("b", config.advice[0], 1, Value.known(2))
            return region

        first = layouter.assign_region("first", two_rows)
        second = layouter.assign_region("second", two_rows)

        assert (first.start, second.start) == (0, 2)
        assert layouter.region_starts == [0, 2]
        assert layouter.cursor == 4
        assert [r.name for r in table.regions] == ["first", "second"]

    def test_assigned_cell_has_absolute_row(self, frozen_cs) -> None:
        layouter, table, config = _layouter(frozen_cs)
        layouter.assign_region("pad", lambda r: r.assign_advice("p", config.advice[0], 0, 0))
        cell = layouter.assign_region(
            "x", lambda r: r.assign_advice("x", config.advice[1], 1, Value.known(7)))

        assert cell.cell.row == 2
        assert cell.cell.region_index == 1
        assert table.advice[1][2] == Value.known(7)

    def test_commit_twice(self, frozen_cs) -> None:
        layouter, _, config = _layouter(frozen_cs)

        def commit_early(region):
            region.assign_advice("a", config.advice[0], 0, Value.known(1))
            region.commit()

        with pytest.raises(SynthesisError, match="committed twice"):
            layouter.assign_region("early", commit_early)

    def test_no_assignment_after_commit(self, frozen_cs) -> None:
        layouter, _, config = _layouter(frozen_cs)
        region = layouter.assign_region("r", lambda r: r)
        assert region.committed
        with pytest.raises(SynthesisError):
            region.assign_advice("late", config.advice[0], 0, Value.known(1))

    def test_nested_regions_rejected(self, frozen_cs) -> None:
        layouter, _, _ = _layouter(frozen_cs)
        with pytest.raises(SynthesisError):
            layouter.assign_region("outer", lambda r: layouter.assign_region("inner", lambda _: None))

    def test_namespace_prefixes_region_names(self, frozen_cs) -> None:
        layouter, table, config = _layouter(frozen_cs)
        ns = layouter.namespace("x^2").namespace("inner")
        ns.assign_region("mul", lambda r: r.assign_advice("a", config.advice[0], 0, 1))
        assert table.regions[0].name == "x^2 / inner / mul"


class TestTableRules:

    def test_row_beyond_usable_rows(self, frozen_cs) -> None:
        layouter, table, config = _layouter(frozen_cs)
        assert table.usable_rows == 10
        with pytest.raises(NotEnoughRowsAvailable):
            layouter.assign_region(
                "big", lambda r: r.assign_advice("a", config.advice[0], 10, Value.known(1)))

    def test_layout_continues_after_failed_region(self, frozen_cs) -> None:
        layouter, table, config = _layouter(frozen_cs)

        def overflow(region):
            region.assign_advice("a", config.advice[0], 0, Value.known(1))
            region.assign_advice("b", config.advice[0], 10, Value.known(2))

        with pytest.raises(NotEnoughRowsAvailable):
            layouter.assign_region("bad", overflow)

        # the row written before the failure is skipped, not reused
        cell = layouter.assign_region(
            "good", lambda r: r.assign_advice("c", config.advice[0], 0, Value.known(3)))
        assert cell.cell.row == 1
        assert [r.name for r in table.regions] == ["bad", "good"]
        assert layouter.region_starts == [1]

    def test_failed_empty_region_leaves_cursor(self, frozen_cs) -> None:
        layouter, _, config = _layouter(frozen_cs)
        with pytest.raises(NotEnoughRowsAvailable):
            layouter.assign_region(
                "bad", lambda r: r.assign_advice("a", config.advice[0], 10, Value.known(1)))
        assert layouter.cursor == 0
        cell = layouter.assign_region(
            "good", lambda r: r.assign_advice("c", config.advice[0], 0, Value.known(3)))
        assert cell.cell.row == 0

    def test_cell_assigned_once(self, frozen_cs) -> None:
        _, table, config = _layouter(frozen_cs)
        table.assign_advice("a", config.advice[0], 0, Value.known(1))
        with pytest.raises(SynthesisError, match="already assigned"):
            table.assign_advice("a again", config.advice[0], 0, Value.known(2))
        assert table.advice[0][0] == Value.known(1)

    def test_copy_requires_equality(self) -> None:
        from constraints.system import ConstraintSystem

        cs = ConstraintSystem()
        enabled = cs.advice_column()
        disabled = cs.advice_column()
        cs.enable_equality(enabled)
        cs.freeze()
        table = Table(4, cs)
        with pytest.raises(ColumnNotInPermutation):
            table.copy(enabled, 0, disabled, 1)
        assert table.copies == []

    def test_exclusive_selectors_on_one_row(self, frozen_cs) -> None:
        layouter, table, config = _layouter(frozen_cs)

        def both(region):
            region.enable_selector("mul", config.s_mul, 0)
            region.enable_selector("add", config.s_add, 0)

        with pytest.raises(SynthesisError, match="exclusive"):
            layouter.assign_region("both", both)

    def test_same_selector_on_different_rows(self, frozen_cs) -> None:
        layouter, table, config = _layouter(frozen_cs)

        def spread(region):
            region.enable_selector("mul", config.s_mul, 0)
            region.enable_selector("add", config.s_add, 1)

        layouter.assign_region("spread", spread)
        assert table.selectors[config.s_mul.index, 0]
        assert table.selectors[config.s_add.index, 1]

    def test_table_requires_frozen_system(self) -> None:
        from constraints.system import ConstraintSystem

        with pytest.raises(ConfigurationError):
            Table(4, ConstraintSystem())


class TestConstants:

    def test_constants_go_to_constant_column(self, frozen_cs) -> None:
        layouter, table, config = _layouter(frozen_cs)
        layouter.assign_region("pad", lambda r: r.assign_advice("p", config.advice[0], 0, 0))
        loaded = layouter.assign_region(
            "c", lambda r: r.assign_advice_from_constant("c", config.advice[0], 0, 5))
        layouter.assign_constants()

        # the fixed column is unused by regions, so constants start at row 0
        assert table.fixed[config.constant.index][0] == Value.known(5)
        assert table.copies[-1].right_row == loaded.cell.row == 1
        assert layouter.pending_constants == []

    def test_constants_without_constant_column(self) -> None:
        from constraints.system import ConstraintSystem

        cs = ConstraintSystem()
        advice = cs.advice_column()
        cs.enable_equality(advice)
        cs.freeze()
        layouter = SingleChipLayouter(cs, Table(4, cs))
        layouter.assign_region("c", lambda r: r.assign_advice_from_constant("c", advice, 0, 5))
        with pytest.raises(SynthesisError, match="no constant column"):
            layouter.assign_constants()
