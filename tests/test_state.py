import pytest

from ghanfoot.model.state import LogBook, LogEntry
from ghanfoot.model.units import Unit


def test_new_book_has_one_default_entry():
    book = LogBook()
    assert len(book) == 1
    assert book[0] == LogEntry(length="", circumference="", length_unit=Unit.METER,
                               circumference_unit=Unit.CENTIMETER)


def test_add_log_appends_default_entry():
    book = LogBook()
    assert book.add_log() == 1
    assert book.add_log() == 2
    assert len(book) == 3
    assert book[2] == LogEntry()


def test_update_log_sets_field_by_name():
    book = LogBook()
    book.update_log(0, "length", "3.2")
    book.update_log(0, "circumferenceUnit", "in")
    book.update_log(0, "length_unit", "ft")

    assert book[0] == LogEntry("3.2", "", "ft", "in")


def test_update_log_rejects_unknown_field():
    book = LogBook()
    with pytest.raises(ValueError):
        book.update_log(0, "diameter", "10")


def test_update_log_rejects_bad_index():
    book = LogBook()
    with pytest.raises(IndexError):
        book.update_log(3, "length", "1")


def test_remove_log():
    book = LogBook()
    book.add_log()
    book.update_log(1, "length", "7")

    assert book.remove_log(0) is True
    assert len(book) == 1
    assert book[0].length == "7"


def test_last_log_cannot_be_removed():
    book = LogBook()
    assert book.remove_log(0) is False
    assert len(book) == 1


def test_remove_log_rejects_bad_index():
    book = LogBook()
    with pytest.raises(IndexError):
        book.remove_log(5)


def test_reset_leaves_one_empty_entry():
    book = LogBook()
    book.add_log()
    book.update_log(0, "length", "1")
    book.reset()

    assert book.entries == (LogEntry(),)


def test_entries_is_a_snapshot():
    book = LogBook()
    entries = book.entries
    book.add_log()
    assert len(entries) == 1
    assert len(book.entries) == 2


def test_volume_and_total_follow_edits():
    book = LogBook()
    assert book.total() == "0.00"

    book.update_log(0, "length", "1")
    book.update_log(0, "circumference", "100")
    assert book.volume_of(0).individual == pytest.approx(0.0625)
    assert book.total() == "2.21"

    book.add_log()
    book.update_log(1, "length", "1")
    book.update_log(1, "circumference", "100")
    assert book.total() == "4.41"
