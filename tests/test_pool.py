from tilequest.pool import Handle, Pool


def test_emplace_and_get():
    pool = Pool()
    a = pool.emplace("a")
    b = pool.emplace("b")
    assert pool.get(a) == "a"
    assert pool.get(b) == "b"
    assert len(pool) == 2


def test_first_generation_is_one():
    pool = Pool()
    handle = pool.emplace(10)
    assert handle.generation == 1


def test_default_handle_is_invalid():
    pool = Pool()
    pool.emplace("x")
    assert pool.get(Handle()) is None


def test_free_invalidates_handle():
    pool = Pool()
    handle = pool.emplace("x")
    pool.free(handle)
    assert pool.get(handle) is None


def test_freed_slot_reused_with_new_generation():
    pool = Pool()
    old = pool.emplace("old")
    pool.free(old)
    new = pool.emplace("new")
    assert new.index == old.index
    assert new.generation == old.generation + 1
    assert pool.get(new) == "new"
    assert pool.get(old) is None
    assert len(pool) == 1


def test_double_free_is_ignored():
    pool = Pool()
    handle = pool.emplace("x")
    pool.free(handle)
    pool.free(handle)
    first = pool.emplace("y")
    second = pool.emplace("z")
    assert first.index == handle.index
    assert second.index != handle.index


def test_out_of_range_handle():
    pool = Pool()
    pool.emplace("x")
    assert pool.get(Handle(index=5, generation=1)) is None
    pool.free(Handle(index=5, generation=1))
    assert len(pool) == 1


def test_clear():
    pool = Pool()
    handle = pool.emplace("x")
    pool.clear()
    assert len(pool) == 0
    assert pool.get(handle) is None