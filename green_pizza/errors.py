# errors.py

from typing import Optional

# Failures reported to the client as {"error": message}

class OrderServiceError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BadRequest(OrderServiceError):
    status_code = 400
    message = "Missing required fields"


class NotFound(OrderServiceError):
    status_code = 404
    message = "Pizza not found"
