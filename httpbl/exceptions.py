"""Exception types raised by HTTP:BL lookups."""


class HttpBLError(Exception):
    """Base class for HTTP:BL lookup failures."""


class InvalidAddress(HttpBLError, ValueError):
    """Raised when the address to check is not a valid IPv4 address.

    Attributes:
        ip: The rejected input, as given.
    """

    def __init__(self, ip: object):
        self.ip = ip
        super().__init__(f"Provided IP must be in IPv4 notation: {ip!r}")


class UnexpectedResponse(HttpBLError):
    """Raised when the resolver answer does not follow the 127.D.T.V encoding.

    Attributes:
        ip: IPv4 address that was queried.
        response: Raw resolver answer.
    """

    def __init__(self, ip: str, response: str, reason: str = ""):
        self.ip = ip
        self.response = response
        message = f"HTTP:BL lookup for IP {ip} failed. Response was {response}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
