from wireframe.menu import MenuEntry, TEXT_COLOR, TITLE_COLOR, menu_entries


def test_first_entry_is_title():
    assert menu_entries()[0] == MenuEntry(10, 50, TITLE_COLOR, "       Operation Key       ")


def test_last_entry():
    last = menu_entries()[-1]
    assert last.text == "   parallel      =>     P"
    assert last.color == TEXT_COLOR


def test_entry_count():
    assert len(menu_entries()) == 17


def test_entries_go_down_in_one_column():
    entries = menu_entries()
    assert all(entry.x == 10 for entry in entries)
    ys = [entry.y for entry in entries]
    assert ys == sorted(ys)
    assert len(set(ys)) == len(ys)


def test_every_key_listed():
    texts = " ".join(entry.text for entry in menu_entries())
    for key in ("ESC", "K", "J", "H", "L", "S / W", "D / E", "F / R", "< / >", "I", "U", "P"):
        assert key in texts