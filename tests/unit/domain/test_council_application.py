"""Unit tests for CouncilApplication and ApplicationBook."""

import pytest

from residence_council.domain.errors.application import DuplicateApplicationError
from residence_council.domain.errors.registry import UnauthorizedError
from residence_council.domain.models.council_application import (
    ApplicationBook,
    CouncilApplication,
)
from residence_council.domain.models.council_role import CouncilRole
from residence_council.domain.models.principal import Principal
from residence_council.domain.models.residence import Apartment


@pytest.fixture
def alice() -> Principal:
    return Principal("alice")


@pytest.fixture
def bob() -> Principal:
    return Principal("bob")


@pytest.fixture
def book() -> ApplicationBook:
    return ApplicationBook()


class TestApply:
    """Tests for ApplicationBook.apply."""

    def test_records_application(self, book: ApplicationBook, alice: Principal) -> None:
        apartment = Apartment(1, "1A", alice)

        application = book.apply(apartment, CouncilRole.CHAIRMAN, alice)

        assert application == CouncilApplication(1, CouncilRole.CHAIRMAN)
        assert book.application_of(alice) == application
        assert len(book) == 1

    def test_non_owner_rejected(
        self, book: ApplicationBook, alice: Principal, bob: Principal
    ) -> None:
        """Only the owner may apply on behalf of an apartment."""
        with pytest.raises(UnauthorizedError):
            book.apply(Apartment(1, "1A", alice), CouncilRole.CHAIRMAN, bob)
        assert book.is_empty()

    def test_second_application_same_role_rejected(
        self, book: ApplicationBook, alice: Principal
    ) -> None:
        apartment = Apartment(1, "1A", alice)
        book.apply(apartment, CouncilRole.CHAIRMAN, alice)

        with pytest.raises(DuplicateApplicationError):
            book.apply(apartment, CouncilRole.CHAIRMAN, alice)

    def test_second_application_other_role_rejected(
        self, book: ApplicationBook, alice: Principal
    ) -> None:
        """One application per owner across all roles."""
        apartment = Apartment(1, "1A", alice)
        book.apply(apartment, CouncilRole.CHAIRMAN, alice)

        with pytest.raises(DuplicateApplicationError) as exc_info:
            book.apply(apartment, CouncilRole.TREASURER, alice)

        assert exc_info.value.existing_role is CouncilRole.CHAIRMAN
        assert exc_info.value.requested_role is CouncilRole.TREASURER
        assert book.candidates(CouncilRole.TREASURER) == ()

    def test_owner_of_two_apartments_applies_once(
        self, book: ApplicationBook, alice: Principal
    ) -> None:
        """Uniqueness is per owner identity, not per apartment."""
        book.apply(Apartment(1, "1A", alice), CouncilRole.CHAIRMAN, alice)

        with pytest.raises(DuplicateApplicationError):
            book.apply(Apartment(2, "2A", alice), CouncilRole.CONTROLLER, alice)


class TestListing:
    """Tests for list_applications ordering and restartability."""

    def test_ordered_by_apartment_then_role(self, book: ApplicationBook) -> None:
        owners = {n: Principal(f"owner-{n}") for n in (1, 2, 3, 4)}
        book.apply(Apartment(3, "3A", owners[3]), CouncilRole.CHAIRMAN, owners[3])
        book.apply(Apartment(1, "1A", owners[1]), CouncilRole.CONTROLLER, owners[1])
        book.apply(Apartment(4, "4A", owners[4]), CouncilRole.TREASURER, owners[4])
        book.apply(Apartment(2, "2A", owners[2]), CouncilRole.CHAIRMAN, owners[2])

        listed = [(a.apartment_number, a.role) for a in book.list_applications()]

        assert listed == [
            (1, CouncilRole.CONTROLLER),
            (2, CouncilRole.CHAIRMAN),
            (3, CouncilRole.CHAIRMAN),
            (4, CouncilRole.TREASURER),
        ]

    def test_listing_is_restartable(self, book: ApplicationBook, alice: Principal) -> None:
        book.apply(Apartment(1, "1A", alice), CouncilRole.CHAIRMAN, alice)
        listing = book.list_applications()

        assert list(listing) == list(listing)
        assert len(listing) == 1

    def test_listing_sees_later_applications(
        self, book: ApplicationBook, alice: Principal, bob: Principal
    ) -> None:
        listing = book.list_applications()
        assert not listing

        book.apply(Apartment(1, "1A", alice), CouncilRole.CHAIRMAN, alice)
        book.apply(Apartment(2, "2A", bob), CouncilRole.CHAIRMAN, bob)

        assert [a.apartment_number for a in listing] == [1, 2]

    def test_candidates_per_role(
        self, book: ApplicationBook, alice: Principal, bob: Principal
    ) -> None:
        book.apply(Apartment(2, "2A", bob), CouncilRole.CHAIRMAN, bob)
        book.apply(Apartment(1, "1A", alice), CouncilRole.CHAIRMAN, alice)

        assert book.candidates(CouncilRole.CHAIRMAN) == (1, 2)
        assert book.is_candidate(2, CouncilRole.CHAIRMAN)
        assert not book.is_candidate(2, CouncilRole.TREASURER)


class TestReset:
    """Tests for ApplicationBook.reset."""

    def test_reset_clears_and_allows_reapplication(
        self, book: ApplicationBook, alice: Principal
    ) -> None:
        apartment = Apartment(1, "1A", alice)
        book.apply(apartment, CouncilRole.CHAIRMAN, alice)

        assert book.reset() == 1
        assert book.is_empty()

        book.apply(apartment, CouncilRole.TREASURER, alice)
        assert book.application_of(alice) == CouncilApplication(1, CouncilRole.TREASURER)
