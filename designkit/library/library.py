"""The library: its collection, members, staff, loans and reservations."""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta
from typing import Callable

from designkit.library.book import Book, BookCategory, BookStatus
from designkit.library.librarian import Librarian
from designkit.library.member import Member
from designkit.library.reservation import Reservation, ReservationStatus
from designkit.library.transaction import Transaction, TransactionStatus, TransactionType

_transaction_counter = itertools.count(1)
_reservation_counter = itertools.count(1)


class LibraryError(Exception):
    """Raised when a library operation cannot be carried out."""


def _next_transaction_id() -> str:
    return f"TXN{next(_transaction_counter):06d}"


def _next_reservation_id() -> str:
    return f"RES{next(_reservation_counter):06d}"


class Library:
    """A library branch with its books, members, librarians and records."""

    def __init__(
        self,
        library_id: str,
        name: str,
        address: str,
        phone: str,
        email: str,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.library_id = library_id
        self.name = name
        self.address = address
        self.phone = phone
        self.email = email
        self.max_books_per_member = 5
        self.loan_period_days = 14
        self.daily_fine_rate = 1.0
        self.reservation_expiry_days = 7
        self._clock = clock
        self._books: dict[str, Book] = {}
        self._members: dict[str, Member] = {}
        self._librarians: dict[str, Librarian] = {}
        self._transactions: list[Transaction] = []
        self._reservations: list[Reservation] = []

    # Counts

    @property
    def total_books(self) -> int:
        return len(self._books)

    @property
    def total_members(self) -> int:
        return len(self._members)

    @property
    def total_transactions(self) -> int:
        return len(self._transactions)

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    @property
    def reservations(self) -> list[Reservation]:
        return list(self._reservations)

    # Books

    def add_book(self, book: Book) -> None:
        if book.isbn in self._books:
            raise LibraryError(f"book already exists: {book.isbn}")
        self._books[book.isbn] = book

    def remove_book(self, isbn: str) -> None:
        if self._books.pop(isbn, None) is None:
            raise LibraryError(f"no such book: {isbn}")

    def find_book(self, isbn: str) -> Book | None:
        return self._books.get(isbn)

    def search_books(self, query: str) -> list[Book]:
        """Books whose title or author contains the query, ignoring case."""
        needle = query.lower()
        return [
            book
            for book in self._books.values()
            if needle in book.title.lower() or needle in book.author.lower()
        ]

    def books_by_category(self, category: BookCategory) -> list[Book]:
        return [book for book in self._books.values() if book.category is category]

    def available_books(self) -> list[Book]:
        return [book for book in self._books.values() if book.is_available()]

    # Members

    def add_member(self, member: Member) -> None:
        if member.member_id in self._members:
            raise LibraryError(f"member already exists: {member.member_id}")
        self._members[member.member_id] = member

    def remove_member(self, member_id: str) -> None:
        if self._members.pop(member_id, None) is None:
            raise LibraryError(f"no such member: {member_id}")

    def find_member(self, member_id: str) -> Member | None:
        return self._members.get(member_id)

    def all_members(self) -> list[Member]:
        return list(self._members.values())

    # Librarians

    def add_librarian(self, librarian: Librarian) -> None:
        if librarian.employee_id in self._librarians:
            raise LibraryError(f"librarian already exists: {librarian.employee_id}")
        self._librarians[librarian.employee_id] = librarian

    def remove_librarian(self, employee_id: str) -> None:
        if self._librarians.pop(employee_id, None) is None:
            raise LibraryError(f"no such librarian: {employee_id}")

    def find_librarian(self, employee_id: str) -> Librarian | None:
        return self._librarians.get(employee_id)

    # Loans

    def _open_borrow(self, member_id: str, book_isbn: str) -> Transaction | None:
        return next(
            (
                t
                for t in self._transactions
                if t.member_id == member_id
                and t.book_isbn == book_isbn
                and t.transaction_type is TransactionType.BORROW
                and t.status is not TransactionStatus.COMPLETED
            ),
            None,
        )

    def borrow_book(self, member_id: str, book_isbn: str, librarian_id: str) -> Transaction:
        """Lend a copy of a book to a member and record the loan."""
        member = self.find_member(member_id)
        book = self.find_book(book_isbn)
        if member is None or book is None:
            raise LibraryError("unknown member or book")
        if not member.can_borrow_book():
            raise LibraryError(f"member {member_id} may not borrow")
        if not book.is_available():
            raise LibraryError(f"book {book_isbn} is not available")

        transaction = Transaction(
            _next_transaction_id(),
            member_id,
            book_isbn,
            librarian_id,
            TransactionType.BORROW,
            transaction_date=self._clock(),
        )
        book.available_copies -= 1
        if book.available_copies == 0:
            book.status = BookStatus.BORROWED
        member.add_borrowed_book(book_isbn)
        self._transactions.append(transaction)
        return transaction

    def return_book(self, member_id: str, book_isbn: str, librarian_id: str) -> Transaction:
        """Close the member's open loan of the book and put the copy back."""
        member = self.find_member(member_id)
        book = self.find_book(book_isbn)
        if member is None or book is None:
            raise LibraryError("unknown member or book")
        transaction = self._open_borrow(member_id, book_isbn)
        if transaction is None:
            raise LibraryError(f"no open loan of {book_isbn} for {member_id}")

        now = self._clock()
        transaction.status = TransactionStatus.COMPLETED
        transaction.return_date = now
        if transaction.is_overdue(now):
            fine = transaction.calculate_fine(self.daily_fine_rate, now)
            member.add_fine(fine)
            transaction.fine_amount = fine

        book.available_copies += 1
        if book.status is BookStatus.BORROWED:
            book.status = BookStatus.AVAILABLE
        member.remove_borrowed_book(book_isbn)
        return transaction

    def renew_book(self, member_id: str, book_isbn: str, librarian_id: str) -> Transaction:
        """Record a renewal extending the open loan by one loan period."""
        member = self.find_member(member_id)
        if member is None:
            raise LibraryError(f"no such member: {member_id}")
        if member.fine_balance > 0:
            raise LibraryError(f"member {member_id} has outstanding fines")
        transaction = self._open_borrow(member_id, book_isbn)
        if transaction is None:
            raise LibraryError(f"no open loan of {book_isbn} for {member_id}")

        renewal = Transaction(
            _next_transaction_id(),
            member_id,
            book_isbn,
            librarian_id,
            TransactionType.RENEW,
            transaction_date=self._clock(),
        )
        renewal.due_date = transaction.due_date + timedelta(days=self.loan_period_days)
        self._transactions.append(renewal)
        return renewal

    def member_transactions(self, member_id: str) -> list[Transaction]:
        return [t for t in self._transactions if t.member_id == member_id]

    def overdue_transactions(self) -> list[Transaction]:
        now = self._clock()
        return [t for t in self._transactions if t.is_overdue(now)]

    # Reservations

    def reserve_book(self, member_id: str, book_isbn: str) -> Reservation:
        """Place a hold on a title that is currently out on loan."""
        member = self.find_member(member_id)
        book = self.find_book(book_isbn)
        if member is None or book is None:
            raise LibraryError("unknown member or book")
        if not member.can_borrow_book():
            raise LibraryError(f"member {member_id} may not reserve")
        if book.status is not BookStatus.BORROWED:
            raise LibraryError(f"book {book_isbn} is not out on loan")
        reservation = Reservation(
            _next_reservation_id(), member_id, book_isbn, reservation_date=self._clock()
        )
        self._reservations.append(reservation)
        return reservation

    def cancel_reservation(self, reservation_id: str) -> None:
        reservation = next(
            (r for r in self._reservations if r.reservation_id == reservation_id), None
        )
        if reservation is None:
            raise LibraryError(f"no such reservation: {reservation_id}")
        reservation.status = ReservationStatus.CANCELLED

    def member_reservations(self, member_id: str) -> list[Reservation]:
        return [r for r in self._reservations if r.member_id == member_id]

    # Fines

    def calculate_fine(self, member_id: str) -> float:
        """Fines accrued so far on the member's overdue loans."""
        if self.find_member(member_id) is None:
            return 0.0
        now = self._clock()
        return sum(
            (
                t.calculate_fine(self.daily_fine_rate, now)
                for t in self._transactions
                if t.member_id == member_id
                and t.transaction_type is TransactionType.BORROW
                and t.is_overdue(now)
            ),
            0.0,
        )

    def pay_fine(self, member_id: str, amount: float) -> None:
        member = self.find_member(member_id)
        if member is None:
            raise LibraryError(f"no such member: {member_id}")
        member.pay_fine(amount)

    def transactions_with_fines(self) -> list[Transaction]:
        return [t for t in self._transactions if t.fine_amount > 0]

    # Reporting

    def most_popular_books(self, limit: int = 10) -> list[Book]:
        return list(itertools.islice(self._books.values(), max(limit, 0)))

    def top_borrowers(self, limit: int = 10) -> list[Member]:
        borrowers = (m for m in self._members.values() if m.current_books_borrowed > 0)
        return list(itertools.islice(borrowers, max(limit, 0)))

    # Maintenance

    def process_overdue_books(self) -> None:
        """Mark every open overdue loan as OVERDUE."""
        now = self._clock()
        for transaction in self._transactions:
            if (
                transaction.is_overdue(now)
                and transaction.status is not TransactionStatus.COMPLETED
            ):
                transaction.status = TransactionStatus.OVERDUE

    def _update_book_availability(self, isbn: str, available: bool) -> None:
        book = self.find_book(isbn)
        if book is not None:
            book.status = BookStatus.AVAILABLE if available else BookStatus.BORROWED