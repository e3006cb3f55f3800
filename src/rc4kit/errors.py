class Rc4KitError(Exception):
    """Base class for all rc4kit failures."""


class InvalidKey(Rc4KitError, ValueError):
    """The supplied cipher key is empty."""


class MalformedHex(Rc4KitError, ValueError):
    """Hex text has an odd length or contains a non-hex character."""


class AllocationFailure(Rc4KitError, MemoryError):
    """A result buffer could not be allocated."""


class InvalidHandle(Rc4KitError, LookupError):
    """The buffer handle is unknown or has already been released."""
