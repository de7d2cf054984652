import pytest

from qorcore.osmem import MemAction, MemActionKind, Os, ProcessMem


def test_allocate_returns_block_of_size():
    mem = ProcessMem()
    block = mem.allocate(16, 8)
    assert len(block) == 16
    assert bytes(block) == bytes(16)


def test_history_records_alloc_and_dealloc():
    mem = ProcessMem()
    block = mem.allocate(32, 4)
    mem.deallocate(block, 32, 4)
    first, second = mem.history()
    assert first.kind is MemActionKind.ALLOC
    assert second.kind is MemActionKind.DEALLOC
    assert (first.size, first.align) == (32, 4)
    assert first.address == second.address


def test_deallocate_unknown_block_raises():
    mem = ProcessMem()
    with pytest.raises(ValueError):
        mem.deallocate(bytearray(4), 4, 1)
    assert mem.history() == ()


def test_invalid_alignment_raises():
    mem = ProcessMem()
    with pytest.raises(ValueError):
        mem.allocate(8, 3)
    with pytest.raises(ValueError):
        mem.allocate(-1, 8)


def test_action_display_format():
    action = MemAction(MemActionKind.ALLOC, 16, 8, 0x1000)
    assert str(action).startswith("alloc: 0x0000000000000010 %0x0000000000000008 -> 0x")
    dealloc = MemAction(MemActionKind.DEALLOC, 16, 8, 0x1000)
    assert str(dealloc).startswith("dealloc: 0x")
    assert str(dealloc).endswith(" 0x0000000000000010 %0x0000000000000008")


def test_dump_prints_history(capsys):
    mem = ProcessMem()
    block = mem.allocate(8, 8)
    mem.deallocate(block, 8, 8)
    mem.dump()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [""] + [str(action) for action in mem.history()]


def test_os_name():
    assert Os.name() == "unknown"


def test_os_memory_is_shared():
    block = Os.memory().allocate(24, 8)
    last = Os.memory().history()[-1]
    assert last.kind is MemActionKind.ALLOC
    assert last.size == 24
    Os.memory().deallocate(block, 24, 8)
    last = Os.memory().history()[-1]
    assert last.kind is MemActionKind.DEALLOC
    assert last.size == 24


def test_os_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Os()