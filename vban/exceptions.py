class VbanError(Exception):
    """
    The base exception for the ledger. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class InsufficientBalance(VbanError):
    """
    The sending account cannot cover the amount of a transfer.
    Raised before any balance is written.

    :ivar account: The account that attempted the transfer
    :ivar balance: Its balance at the time of the attempt
    :ivar value: The amount it attempted to send
    """
    fmt = "Account '{account}' has {balance} and cannot send {value}"


class InvalidBalance(VbanError):
    """
    A value passed in as a balance or amount is not a non-negative
    integer that fits in the balance width.

    :ivar value: The offending value
    """
    fmt = "Invalid balance value '{value}'"


class BalanceOverflow(VbanError):
    """
    Arithmetic on balances produced a result outside of the balance
    range. Conservation of supply makes this unreachable.

    :ivar value: The out of range result
    """
    fmt = "Balance arithmetic left the valid range with '{value}'"


class LedgerExists(VbanError):
    """
    When constructing a ledger, found that one with the same name
    has already been constructed on this state

    :ivar name: The name of the ledger
    """
    fmt = "Ledger with name '{name}' already exists in the database"


class LedgerNotFound(VbanError):
    """
    :ivar name: The name of the ledger that has not been constructed
    """
    fmt = "Ledger with name '{name}' has not been constructed"
