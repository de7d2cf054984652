import pytest

from qorcore.errors import INVALID_ID, QorError
from qorcore.ids import FNV_SEED_TAG_VALUE, Id, Tag


def test_id_index_and_display():
    ident = Id(42)
    assert ident.index() == 42
    assert str(ident) == "#042"
    assert str(Id.invalid()) == "#invalid"


def test_id_wide_index_display():
    assert str(Id(1000)) == "#1000"


def test_invalid_id_index_raises():
    with pytest.raises(QorError) as info:
        Id.invalid().index()
    assert info.value.code == INVALID_ID


def test_id_invalidate():
    ident = Id(7)
    assert ident.is_valid()
    ident.invalidate()
    assert not ident.is_valid()
    assert ident == Id.invalid()


def test_id_equality_and_hash():
    assert Id(3) == Id(3)
    assert len({Id(3), Id(3), Id(4)}) == 2


def test_id_out_of_range():
    with pytest.raises(ValueError):
        Id(-1)


def test_tag_direct_value():
    assert Tag.from_text(b"01234567").value() == 0x3736353433323130


def test_tag_hash_value():
    assert Tag.from_str("/root/folder/file.txt").value() == 0xCBF7932F2AA742BC


def test_tag_debug_text():
    assert repr(Tag.from_text(b"mem_heap")) == "#mem_heap 706165685f6d656d"


def test_tag_debug_raw_value():
    assert repr(Tag(0x71C0)) == "#00000000000071c0"


def test_tag_debug_invalid():
    assert repr(Tag.invalid()) == "#invalid"


def test_tag_display():
    assert str(Tag.from_text(b"mem_heap")) == "#mem_heap"
    assert str(Tag(0x71C0)) == "#00000000000071c0"
    assert str(Tag.from_str("/root/folder/file.txt")) == "#cbf7932f2aa742bc"
    assert str(Tag.invalid()) == "#invalid"


def test_tag_from_text_clears_hash_bit():
    assert Tag.from_text(b"\xff" * 8).value() == Tag.HASH_MASK


def test_tag_from_text_str_matches_bytes():
    assert Tag.from_text("mem_heap") == Tag.from_text(b"mem_heap")


def test_tag_from_text_wrong_length():
    with pytest.raises(ValueError):
        Tag.from_text(b"short")


def test_tag_from_const_sets_hash_bit():
    assert Tag.from_const(5).value() == Tag.HASH_BIT | 5


def test_tag_from_raw_is_unaltered():
    assert Tag.from_raw(0x71C0).value() == 0x71C0
    assert int(Tag.from_raw(0x71C0)) == 0x71C0


def test_with_added_str_from_seed_equals_from_str():
    seed = Tag.from_raw(FNV_SEED_TAG_VALUE)
    assert seed.with_added_str("abc") == Tag.from_str("abc")


def test_with_added_tag_is_hashed_and_deterministic():
    base = Tag.from_text(b"@[]_____")
    first = base.with_added_tag(Tag.from_raw(4))
    second = base.with_added_tag(Tag.from_raw(4))
    other = base.with_added_tag(Tag.from_raw(5))
    assert first == second
    assert first != other
    assert first.value() & Tag.HASH_BIT


def test_tag_invalidate():
    tag = Tag.from_text(b"mem_heap")
    tag.invalidate()
    assert not tag.is_valid()
    assert tag == Tag.invalid()


def test_tag_hash_consistent():
    assert len({Tag.from_str("x"), Tag.from_str("x"), Tag.from_str("y")}) == 2


def test_tag_out_of_range():
    with pytest.raises(ValueError):
        Tag(1 << 64)