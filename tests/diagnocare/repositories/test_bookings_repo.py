import pytest

from diagnocare.core.exceptions import NotFoundError, SlotsUnavailableError
from diagnocare.repositories.bookings_repo import BookingRepository
from diagnocare.repositories.diagnostic_tests_repo import DiagnosticTestRepository


@pytest.fixture
def blood_test_id(db) -> str:
    return DiagnosticTestRepository(db).insert({'name': 'Blood panel', 'slots': 2, 'bookings': 0}).inserted_id


def test_create_with_slot_update_takes_one_slot(db, blood_test_id) -> None:
    bookings = BookingRepository(db)

    result = bookings.create_with_slot_update({'email': 'pat@example.com', 'date': '2026-11-02'}, blood_test_id)

    booking = bookings.find_one({'_id': result.inserted_id})
    assert booking['testId'] == blood_test_id
    assert booking['date'] == '2026-11-02'
    test = DiagnosticTestRepository(db).find_one({'_id': blood_test_id})
    assert test['slots'] == 1
    assert test['bookings'] == 1


def test_create_with_slot_update_uses_given_slot_count(db, blood_test_id) -> None:
    BookingRepository(db).create_with_slot_update({'email': 'pat@example.com'}, blood_test_id, slots=7)

    test = DiagnosticTestRepository(db).find_one({'_id': blood_test_id})
    assert test['slots'] == 7
    assert test['bookings'] == 1


def test_create_with_slot_update_for_missing_test_writes_nothing(db) -> None:
    bookings = BookingRepository(db)

    with pytest.raises(NotFoundError):
        bookings.create_with_slot_update({'email': 'pat@example.com'}, 'c' * 24)

    assert bookings.list_all() == []


def test_create_with_slot_update_refuses_when_no_slots_left(db, blood_test_id) -> None:
    bookings = BookingRepository(db)
    bookings.create_with_slot_update({'email': 'a@example.com'}, blood_test_id)
    bookings.create_with_slot_update({'email': 'b@example.com'}, blood_test_id)

    with pytest.raises(SlotsUnavailableError):
        bookings.create_with_slot_update({'email': 'c@example.com'}, blood_test_id)

    assert len(bookings.list_all()) == 2
    test = DiagnosticTestRepository(db).find_one({'_id': blood_test_id})
    assert test['slots'] == 0
    assert test['bookings'] == 2


def test_insert_stores_references_as_strings(db) -> None:
    bookings = BookingRepository(db)

    bookings.insert({'email': 'pat@example.com', 'bookingId': 42})

    assert bookings.find_many({'bookingId': '42'})[0]['email'] == 'pat@example.com'
