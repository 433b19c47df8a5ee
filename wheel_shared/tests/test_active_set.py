from wheel_shared.active_set import active_index_map, active_items, initialize, resync, toggle


ITEMS = ["Alice", "Bob", "Carol"]


def test_initialize_defaults_to_included():
    assert initialize(ITEMS, None) == {"Alice": True, "Bob": True, "Carol": True}


def test_initialize_reuses_persisted_and_ignores_stale():
    mapping = initialize(ITEMS, {"Bob": False, "Dave": False})
    assert mapping == {"Alice": True, "Bob": False, "Carol": True}


def test_resync_keeps_decisions_adds_and_drops():
    current = {"Alice": True, "Bob": False, "Carol": False}
    nxt = resync(["Bob", "Dave"], current)
    assert nxt == {"Bob": False, "Dave": True}


def test_resync_is_idempotent():
    current = {"Alice": False, "Zed": True}
    once = resync(ITEMS, current)
    twice = resync(ITEMS, once)
    assert once == twice
    assert set(twice) == set(ITEMS)


def test_toggle_flips_and_double_toggle_restores():
    start = initialize(ITEMS, None)
    flipped = toggle(ITEMS, start, "Bob", spinning=False)
    assert flipped["Bob"] is False
    assert start["Bob"] is True  # input untouched
    assert toggle(ITEMS, flipped, "Bob", spinning=False) == start


def test_toggle_rejected_while_spinning():
    start = initialize(ITEMS, None)
    assert toggle(ITEMS, start, "Bob", spinning=True) is start


def test_toggle_unknown_label_is_noop():
    start = initialize(ITEMS, None)
    assert toggle(ITEMS, start, "Nobody", spinning=False) is start


def test_active_items_preserves_order():
    mapping = {"Alice": True, "Bob": False, "Carol": True}
    assert active_items(ITEMS, mapping) == ["Alice", "Carol"]


def test_active_items_defaults_missing_to_included():
    assert active_items(ITEMS, {}) == ITEMS


def test_active_set_never_longer_than_items():
    mapping = {"Alice": False}
    assert len(active_items(ITEMS, mapping)) <= len(ITEMS)


def test_duplicates_share_one_entry():
    items = ["Ann", "Ann", "Ben"]
    mapping = toggle(items, initialize(items, None), "Ann", spinning=False)
    assert mapping == {"Ann": False, "Ben": True}
    assert active_items(items, mapping) == ["Ben"]


def test_active_index_map():
    assert active_index_map(["Alice", "Carol"]) == {"Alice": 0, "Carol": 1}
