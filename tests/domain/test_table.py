"""Tests for HashTable: construction, load, query, stats, lifecycle."""

from __future__ import annotations

import pytest

from dnsblock.domain.errors import DEFAULT_TABLE_SIZE, MIN_TABLE_SIZE, ConfigurationError
from dnsblock.domain.hashing import hash_name
from dnsblock.domain.table import HashTable, LoadResult, TableStats


class TestConstruction:
    @pytest.mark.parametrize("size", [-1, 0, 1, 2])
    def test_below_minimum_rejected(self, size: int) -> None:
        with pytest.raises(ConfigurationError, match="equal or larger than 3"):
            HashTable(size)

    def test_minimum_accepted(self) -> None:
        table = HashTable(MIN_TABLE_SIZE)
        assert table.size == 3
        assert len(table) == 0

    def test_default_size(self) -> None:
        assert HashTable(DEFAULT_TABLE_SIZE).size == 1873

    @pytest.mark.parametrize("size", [3.0, "7", True])
    def test_non_integer_rejected(self, size: object) -> None:
        with pytest.raises(ConfigurationError):
            HashTable(size)  # type: ignore[arg-type]

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            HashTable(0)


class TestLoadAndQuery:
    def test_load_then_query(self) -> None:
        table = HashTable(11)
        assert table.load("ads.example.com") is LoadResult.INSERTED
        assert table.query("ads.example.com") is True

    def test_second_load_is_duplicate(self) -> None:
        table = HashTable(11)
        table.load("ads.example.com")
        assert table.load("ads.example.com") is LoadResult.DUPLICATE
        assert table.query("ads.example.com") is True
        assert len(table) == 1

    def test_never_loaded_is_not_blocked(self) -> None:
        table = HashTable(11)
        table.load("ads.example.com")
        assert table.query("safe.example.org") is False

    def test_empty_string(self) -> None:
        table = HashTable(11)
        assert table.query("") is False
        table.load("")
        assert table.query("") is True

    def test_matching_is_exact(self) -> None:
        table = HashTable(11)
        table.load("ads.example.com")
        assert not table.query("ADS.EXAMPLE.COM")
        assert not table.query("ads.example.com.")
        assert not table.query(" ads.example.com")

    def test_contains_operator(self) -> None:
        table = HashTable(11)
        table.load("ads.example.com")
        assert "ads.example.com" in table
        assert "other.example" not in table
        assert 42 not in table

    def test_bucket_index(self) -> None:
        table = HashTable(7)
        assert table.bucket_index("ab") == hash_name("ab") % 7

    def test_query_does_not_mutate(self) -> None:
        table = HashTable(5)
        table.load("a.example")
        before = table.chain_lengths()
        for _ in range(3):
            table.query("b.example")
            table.query("a.example")
        assert table.chain_lengths() == before

    @pytest.mark.parametrize("size", [3, 4, 97, 1873])
    def test_distinct_names_all_stored(self, size: int) -> None:
        names = [f"host{i}.example.com" for i in range(200)]
        table = HashTable(size)
        for name in names:
            assert table.load(name) is LoadResult.INSERTED
        assert table.stats().total_entries == len(names)
        assert all(table.query(name) for name in names)

    def test_collisions_share_a_chain(self) -> None:
        table = HashTable(3)
        for i in range(10):
            table.load(f"n{i}")
        assert max(table.chain_lengths()) >= 4
        assert sum(table.chain_lengths()) == 10


class TestStats:
    def test_empty_table(self) -> None:
        assert HashTable(3).stats() == TableStats(
            size=3, total_entries=0, longest_chain=0, shortest_chain=0, used_buckets=0
        )

    def test_single_entry(self) -> None:
        table = HashTable(3)
        table.load("a")
        stats = table.stats()
        assert stats.total_entries == 1
        assert stats.longest_chain == 1
        assert stats.shortest_chain == 1
        assert stats.used_buckets == 1

    def test_shortest_ignores_empty_chains(self) -> None:
        table = HashTable(1873)
        for i in range(5):
            table.load(f"n{i}.example")
        stats = table.stats()
        assert stats.shortest_chain >= 1
        assert stats.used_buckets == sum(1 for n in table.chain_lengths() if n)

    def test_longest_and_shortest(self) -> None:
        table = HashTable(3)
        for i in range(30):
            table.load(f"n{i}")
        lengths = [n for n in table.chain_lengths() if n]
        stats = table.stats()
        assert stats.longest_chain == max(lengths)
        assert stats.shortest_chain == min(lengths)

    def test_to_dict(self) -> None:
        table = HashTable(3)
        table.load("a")
        assert table.stats().to_dict() == {
            "size": 3,
            "total_entries": 1,
            "longest_chain": 1,
            "shortest_chain": 1,
            "used_buckets": 1,
        }


class TestLifecycle:
    def test_close_releases_everything(self) -> None:
        table = HashTable(3)
        table.load("a.example")
        table.close()
        assert table.closed
        assert len(table) == 0
        assert table.query("a.example") is False

    def test_context_manager_closes(self) -> None:
        with HashTable(3) as table:
            table.load("a.example")
            assert table.query("a.example")
        assert table.closed

    def test_load_after_close_rejected(self) -> None:
        table = HashTable(3)
        table.close()
        with pytest.raises(ValueError, match="closed"):
            table.load("a.example")
