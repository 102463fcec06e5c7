class UnderflowError(Exception):
    """Raised when taking from an empty structure"""


class TreeUnderflowError(UnderflowError):
    pass


class StackUnderflowError(UnderflowError):
    pass


class QueueUnderflowError(UnderflowError):
    pass
