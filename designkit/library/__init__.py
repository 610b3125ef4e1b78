"""Library books, members, librarians, loans, reservations and fines."""