"""Tests for the typed Store."""

import threading

import pytest

from fakekv import HashValue, ListValue, Mode, SetValue, Store, StringValue
from fakekv import TransactionModeViolation, TypeMismatch


class TestStoreTyped:
    def test_get_typed_missing(self):
        s = Store()
        assert s.get_typed("k", ListValue) is None

    def test_get_typed_does_not_create(self):
        s = Store()
        s.get_typed("k", ListValue)
        assert not s.exists("k")

    def test_get_or_create_inserts_empty(self):
        s = Store()
        entry = s.get_or_create_typed("k", HashValue)
        assert isinstance(entry, HashValue)
        assert entry.fields == {}
        assert s.exists("k")

    def test_get_or_create_returns_existing(self):
        s = Store()
        first = s.get_or_create_typed("k", SetValue)
        first.members.add("a")
        assert s.get_or_create_typed("k", SetValue) is first

    def test_wrong_variant_raises(self):
        s = Store()
        s.put("k", StringValue("v"))
        with pytest.raises(TypeMismatch, match="WRONGTYPE") as exc:
            s.get_typed("k", ListValue)
        assert exc.value.key == "k"
        assert exc.value.expected == "list"
        assert exc.value.actual == "string"

    def test_wrong_variant_does_not_create(self):
        s = Store()
        s.put("k", StringValue("v"))
        with pytest.raises(TypeMismatch):
            s.get_or_create_typed("k", HashValue)
        assert s.get_typed("k", StringValue) == StringValue("v")

    def test_put_replaces_any_variant(self):
        s = Store()
        s.get_or_create_typed("k", ListValue)
        s.put("k", StringValue("v"))
        assert s.get_typed("k", StringValue).value == "v"


class TestStoreKeys:
    def test_delete(self):
        s = Store()
        s.put("k", StringValue("v"))
        assert s.delete("k") is True
        assert not s.exists("k")
        assert s.get_typed("k", StringValue) is None

    def test_delete_missing(self):
        s = Store()
        assert s.delete("nope") is False

    def test_contains_and_len(self):
        s = Store()
        s.put("a", StringValue("1"))
        s.get_or_create_typed("b", ListValue)
        assert "a" in s
        assert "nope" not in s
        assert len(s) == 2

    def test_keys_matching_prefix(self):
        s = Store()
        for key in ("test", "testing", "other"):
            s.put(key, StringValue("v"))
        assert s.keys_matching("test*") == {"test", "testing"}

    def test_keys_matching_is_anchored(self):
        s = Store()
        for key in ("test", "atest", "tester"):
            s.put(key, StringValue("v"))
        assert s.keys_matching("test") == {"test"}
        assert s.keys_matching("*test") == {"test", "atest"}

    def test_keys_matching_literal_metacharacters(self):
        s = Store()
        for key in ("a.b", "axb", "a+b"):
            s.put(key, StringValue("v"))
        assert s.keys_matching("a.b") == {"a.b"}
        assert s.keys_matching("a+*") == {"a+b"}

    def test_keys_matching_star_matches_empty(self):
        s = Store()
        s.put("ab", StringValue("v"))
        assert s.keys_matching("a*b") == {"ab"}
        assert s.keys_matching("*") == {"ab"}


class TestStoreMode:
    def test_starts_direct(self):
        s = Store()
        assert s.mode is Mode.DIRECT
        s.ensure_direct()

    def test_in_transaction_rejects_direct(self):
        s = Store()
        s._begin_transaction()
        assert s.mode is Mode.IN_TRANSACTION
        with pytest.raises(TransactionModeViolation):
            s.ensure_direct()

    def test_no_nested_transactions(self):
        s = Store()
        s._begin_transaction()
        with pytest.raises(TransactionModeViolation, match="already open"):
            s._begin_transaction()

    def test_end_transaction_restores_direct(self):
        s = Store()
        s._begin_transaction()
        s._end_transaction()
        assert s.mode is Mode.DIRECT


class TestStoreLock:
    def test_lock_is_reentrant(self):
        s = Store()
        with s.lock:
            with s.lock:
                s.put("k", StringValue("v"))
        assert s.exists("k")

    def test_lock_blocks_other_threads(self):
        s = Store()
        seen = []

        def reader():
            seen.append(s.exists("k"))

        with s.lock:
            t = threading.Thread(target=reader)
            t.start()
            t.join(timeout=0.1)
            assert t.is_alive()
            s.put("k", StringValue("v"))
        t.join()
        assert seen == [True]
