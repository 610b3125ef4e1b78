# designkit

Plain-Python object models for three classic system-design exercises:

- `designkit.elevators`: floors, requests, elevator cars, a `Scheduler`
  with FCFS, SCAN, LOOK, SSTF and priority assignment, and a `Building`
  that ties them together and steps a simple simulation.
- `designkit.library`: books, members, librarians, loan transactions,
  reservations and a `Library` that handles borrowing, returns, renewals
  and fines.
- `designkit.cinema`: seats, screens with a seat grid, movies and
  theaters.

The package has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Elevators

```python
from designkit.elevators.building import Building
from designkit.elevators.elevator import Elevator
from designkit.elevators.floor import Direction
from designkit.elevators.scheduler import SchedulingAlgorithm

building = Building("B1", "Tower", 10, 2)
building.add_elevator(Elevator("E1", 10))
building.add_elevator(Elevator("E2", 10))
building.set_scheduling_algorithm(SchedulingAlgorithm.SSTF)

building.submit_request(building.create_external_request(5, Direction.UP))
building.submit_request(building.create_internal_request(1, 8))
building.run_simulation(10)

print(building.status_report())
print(building.statistics_report())
```

Floors run from the lowest basement (`-basement_floors`) to the top floor,
with no floor 0. `floor_display_name` shows basements as `B1`, `B2`, ...
`create_external_request`, `create_internal_request` and `floor_index`
raise `ValueError` for a floor the building does not have.

External requests press the matching up or down button on their floor and
get priority 2; internal requests get priority 1. Request ids run
`REQ000001`, `REQ000002`, ...

`Scheduler.assign_request` picks an elevator for a request:

- `FCFS`: the first in-service, not-full elevator that can serve both floors;
- `SCAN` and `LOOK`: the lowest cost, where cost is
  `2 * distance + 5 * queued requests + 3 * load`;
- `SSTF`: the elevator nearest the request's source floor;
- `PRIORITY`: the highest weighted score of distance, free capacity and
  request priority.

`Elevator` accepts a `clock` keyword (a callable returning a `datetime`)
so that door timing and `utilization_rate` can be driven by a fixed or
stepped clock in tests. `Request.wait_time` and `Request.total_time` take
an optional `now`.

Reports are returned as strings by `status_report` and
`statistics_report`; nothing is printed by the package itself.

## Library

```python
from designkit.library.book import Book, BookCategory
from designkit.library.library import Library
from designkit.library.member import Member, MemberType

library = Library("L1", "City Library", "1 Main St", "front desk", "desk@example.com")
library.add_book(Book("978-0", "Dune", "Frank Herbert", "Ace", 1965, BookCategory.FICTION, 2))
library.add_member(Member("M1", "Ada", "ada@example.com", "front desk", "2 Elm St", MemberType.STUDENT))

loan = library.borrow_book("M1", "978-0", "LIB1")
returned = library.return_book("M1", "978-0", "LIB1")
```

Operations that cannot be carried out (a duplicate id, an unknown member
or book, a member who may not borrow, a book with no copy on the shelf,
no open loan to return or renew) raise `designkit.library.library.LibraryError`.

Loans run for 14 days; returning late charges the library's
`daily_fine_rate` (1.0 by default) per whole day late and adds it to the
member's `fine_balance`. A member may borrow while active, under the
loan limit for their `MemberType` (Student 5, Faculty 10, Staff 8,
Guest 3, Premium 15) and owing no more than 10.0. Renewal is refused
while any fine is owed. A book can only be reserved while it is out on
loan; reservations last seven days.

`Library` accepts a `clock` keyword used for transaction dates and
overdue checks. Transaction ids run `TXN000001`, ... and reservation ids
`RES000001`, ...

## Cinema

```python
from designkit.cinema.screen import Screen
from designkit.cinema.theater import Theater

screen = Screen("S1", "Main Hall", 5, 8)
screen.reserve_seat_at(0, 0, "BOOKING-1")
print(screen.seat_layout())

theater = Theater("T1", "Odeon", "Downtown", "3 High St", "box office")
theater.add_screen(screen)
print(theater.theater_info())
```

Seats have ids `<screen id>_<row>_<column>` (zero-based) and are named by
row letter and one-based column number (`A1`, `B5`, ...); the layout marks
free seats `[ ]`, reserved `[R]`, occupied `[X]` and out of service `[M]`.

Reserving a seat that is not available, or occupying one that is not
reserved, raises `designkit.cinema.screen.SeatUnavailableError`. An
unknown seat id raises `KeyError`; a position off the grid raises
`IndexError`. `Theater.remove_screen` raises `KeyError` for an unknown
screen.

## What the package does not do

- It has no command-line program and no server; everything is used from
  Python.
- Nothing is stored: all state lives in memory for the life of the objects.
- The cinema part models seating only. There are no shows, bookings,
  payments or user accounts; a ticket-booking flow has to be built on top
  of `Screen`, `Seat`, `Movie` and `Theater`.