"""Tests for list commands."""

import pytest

from fakekv import Client, TypeMismatch

KEY = "my_key"
FIELD = "my_field"
VALUE = "my_value"


def init_list(c: Client) -> None:
    for i in range(1, 11):
        c.lpush(KEY, f"value_{i}")


class TestLpush:
    def test_lpush_returns_the_length_of_the_list(self):
        c = Client()
        for i in range(1, 11):
            assert c.lpush(KEY, f"{VALUE}_{i}") == i

    def test_lpush_many_values(self):
        c = Client()
        assert c.lpush(KEY, "a", "b", "c") == 3
        assert c.lpush(KEY, "d") == 4
        assert c.llen(KEY) == 4

    def test_last_argument_ends_up_at_head(self):
        c = Client()
        c.lpush(KEY, "a", "b", "c")
        assert c.lrange(KEY, 0, -1) == ["c", "b", "a"]

    def test_lpush_on_a_hash(self):
        c = Client()
        c.hset(KEY, FIELD, VALUE)
        with pytest.raises(TypeMismatch):
            c.lpush(KEY, VALUE)
        assert c.hgetall(KEY) == {FIELD: VALUE}


class TestLpopLlen:
    def test_lpush_and_lpop(self):
        c = Client()
        assert c.lpush(KEY, VALUE) == 1
        assert c.lpop(KEY) == VALUE
        assert c.llen(KEY) == 0

    def test_lpop_returns_head(self):
        c = Client()
        c.lpush(KEY, "a", "b")
        assert c.lpop(KEY) == "b"
        assert c.lpop(KEY) == "a"
        assert c.lpop(KEY) is None

    def test_lpop_on_missing_key(self):
        c = Client()
        assert c.lpop(KEY) is None
        assert not c.exists(KEY)

    def test_llen_on_a_null_list_returns_0(self):
        c = Client()
        assert c.llen(KEY) == 0
        assert not c.exists(KEY)

    def test_llen_on_a_hash(self):
        c = Client()
        c.hset(KEY, FIELD, VALUE)
        with pytest.raises(TypeMismatch, match="WRONGTYPE Operation against a key holding the wrong kind of value"):
            c.llen(KEY)


class TestLrange:
    def test_lrange_on_empty_key(self):
        c = Client()
        assert c.lrange(KEY, 0, 1000) == []

    def test_lrange_on_the_whole_list(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, 0, -1) == [f"value_{10 - i}" for i in range(10)]

    def test_lrange_indexes(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, 1, 4) == ["value_9", "value_8", "value_7", "value_6"]

    def test_lrange_single_element(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, 0, 0) == ["value_10"]
        assert c.lrange(KEY, -1, -1) == ["value_1"]

    def test_lrange_negative_indexes(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, -3, -2) == ["value_3", "value_2"]

    def test_lrange_negative_indexes_reversed(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, -2, -3) == []

    def test_lrange_indexes_reversed(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, 5, 3) == []

    def test_lrange_out_of_bound_indexes(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, 0, 20) == [f"value_{10 - i}" for i in range(10)]

    def test_lrange_out_of_bound_negative_indexes(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, -20, -1) == [f"value_{10 - i}" for i in range(10)]

    def test_lrange_start_past_the_end(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, 15, 20) == []

    @pytest.mark.parametrize("start,end", [(-20, -15), (-15, -12), (-20, -11), (0, -11), (-30, -20)])
    def test_lrange_window_before_the_head(self, start, end):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, start, end) == []

    def test_lrange_window_overlapping_the_head(self):
        c = Client()
        init_list(c)
        assert c.lrange(KEY, -20, -10) == ["value_10"]
        assert c.lrange(KEY, -15, -9) == ["value_10", "value_9"]

    def test_lrange_on_a_set(self):
        c = Client()
        c.sadd(KEY, VALUE)
        with pytest.raises(TypeMismatch):
            c.lrange(KEY, 0, -1)

    def test_lrange_returns_a_copy(self):
        c = Client()
        c.lpush(KEY, "a", "b")
        result = c.lrange(KEY, 0, -1)
        result.append("ghost")
        result[0] = "changed"
        assert c.lrange(KEY, 0, -1) == ["b", "a"]
