class BookRentError(Exception): pass

class NotFoundError(BookRentError): pass

class UserNotFoundError(NotFoundError): pass

class BookNotFoundError(NotFoundError): pass

class ReservationNotFoundError(NotFoundError): pass

class BookUnavailableError(BookRentError): pass

class InvalidReservationStateError(BookRentError): pass

class InvalidRequestError(BookRentError): pass

class DatabaseInsertError(BookRentError): pass
