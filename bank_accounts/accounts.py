"""
Account Management Module

Holds the account ledger entity and its three withdrawal policies.
Default accounts never go below zero, savings accounts refuse overdrafts
and earn interest on demand, current accounts may go negative down to
their overdraft limit.

Operations never print. Each one returns an OperationResult carrying the
status, the human-readable message and the resulting balance; rendering
is left to the caller.
"""

from decimal import Decimal
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum

from .config import get_config
from .currency import AmountLike, ZERO, to_decimal, format_amount
from .logging_config import get_logger, log_action


logger = get_logger(__name__)


class AccountKind(Enum):
    """Account variants; selects the withdrawal policy"""
    DEFAULT = "default"
    SAVINGS = "savings"    # No overdraft, manual interest
    CURRENT = "current"    # Overdraft up to a limit


class OperationStatus(Enum):
    """Outcome of an account operation"""
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class RejectionReason(Enum):
    """Why an operation was rejected"""
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    SAVINGS_OVERDRAW = "savings_overdraw"
    OVERDRAFT_LIMIT_EXCEEDED = "overdraft_limit_exceeded"


# Console messages
DEPOSIT_REJECTED = "Deposit amount must be greater than zero."
WITHDRAW_REJECTED = "Insufficient balance or invalid amount."
SAVINGS_OVERDRAW_REJECTED = "Savings account cannot be overdrawn."
OVERDRAFT_REJECTED = "Withdrawal exceeds overdraft limit or invalid amount."


@dataclass(frozen=True)
class OperationResult:
    """Result of deposit, withdraw, check_balance or add_interest"""
    status: OperationStatus
    message: str
    balance: Decimal
    amount: Optional[Decimal] = None
    reason: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        """Check if the operation changed or reported state successfully"""
        return self.status == OperationStatus.ACCEPTED


class AccountCounter:
    """
    Process-wide count of opened accounts

    Starts at zero on import and is incremented once per successful
    account construction. Nothing decrements it; reset() exists so test
    runs can start from zero. Not synchronised.
    """

    def __init__(self):
        self._count = 0

    @property
    def value(self) -> int:
        return self._count

    def increment(self) -> int:
        self._count += 1
        return self._count

    def reset(self) -> None:
        self._count = 0


account_counter = AccountCounter()


def total_accounts() -> int:
    """Number of accounts constructed so far in this process"""
    return account_counter.value


# balance changes only through deposit, withdraw and add_interest
_GUARDED_FIELDS = frozenset({
    "account_number", "holder_name", "kind",
    "balance", "interest_rate", "overdraft_limit",
})


@dataclass
class Account:
    """
    Bank account entity

    The kind tag decides which withdrawal policy applies. interest_rate is
    a percentage and only used by savings accounts; overdraft_limit is only
    used by current accounts. None of the fields can be reassigned once
    the account is open; the balance moves only through the operations.
    """
    account_number: str
    holder_name: str
    balance: Decimal = ZERO
    kind: AccountKind = AccountKind.DEFAULT
    interest_rate: Decimal = ZERO
    overdraft_limit: Decimal = ZERO
    _initialized: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        self.balance = to_decimal(self.balance)
        self.interest_rate = to_decimal(self.interest_rate)
        self.overdraft_limit = to_decimal(self.overdraft_limit)

        if self.balance < ZERO:
            raise ValueError("Initial balance cannot be negative.")

        self._initialized = True
        account_counter.increment()

        log_action(
            logger, "info", f"Account opened: {self.kind.value}",
            action="open_account", resource=self._resource,
            extra={
                "kind": self.kind.value,
                "holder_name": self.holder_name,
                "balance": str(self.balance),
                "total_accounts": account_counter.value,
            }
        )

    def __setattr__(self, name, value):
        if name in _GUARDED_FIELDS and getattr(self, "_initialized", False):
            raise AttributeError(f"{name} cannot be changed after the account is opened")
        super().__setattr__(name, value)

    def _set_balance(self, value: Decimal) -> None:
        super().__setattr__("balance", value)

    @property
    def _resource(self) -> str:
        return f"account:{self.account_number}"

    @property
    def is_savings(self) -> bool:
        return self.kind == AccountKind.SAVINGS

    @property
    def is_current(self) -> bool:
        return self.kind == AccountKind.CURRENT

    def _fmt(self, value: Decimal) -> str:
        cfg = get_config()
        return format_amount(value, cfg.currency_symbol, cfg.amount_precision)

    def _accept(self, action: str, message: str, amount: Optional[Decimal] = None) -> OperationResult:
        log_action(
            logger, "info", message,
            action=action, resource=self._resource,
            extra={
                "kind": self.kind.value,
                "amount": None if amount is None else str(amount),
                "balance": str(self.balance),
            }
        )
        return OperationResult(
            status=OperationStatus.ACCEPTED,
            message=message,
            balance=self.balance,
            amount=amount,
        )

    def _reject(self, action: str, message: str, amount: Decimal,
                reason: RejectionReason) -> OperationResult:
        log_action(
            logger, "warning", message,
            action=action, resource=self._resource,
            extra={
                "kind": self.kind.value,
                "amount": str(amount),
                "balance": str(self.balance),
                "reason": reason.value,
            }
        )
        return OperationResult(
            status=OperationStatus.REJECTED,
            message=message,
            balance=self.balance,
            amount=amount,
            reason=reason,
        )

    def deposit(self, amount: AmountLike) -> OperationResult:
        """
        Add funds to the account

        Non-positive amounts are rejected and leave the balance untouched.
        """
        amount = to_decimal(amount)
        if amount <= ZERO:
            return self._reject("deposit", DEPOSIT_REJECTED, amount, RejectionReason.INVALID_AMOUNT)

        self._set_balance(self.balance + amount)
        return self._accept(
            "deposit",
            f"{self._fmt(amount)} deposited successfully. Current balance: {self._fmt(self.balance)}",
            amount,
        )

    def withdraw(self, amount: AmountLike) -> OperationResult:
        """
        Take funds out of the account under the policy for its kind

        Returns a REJECTED result, never raises, when the policy refuses.
        """
        amount = to_decimal(amount)
        if self.kind == AccountKind.SAVINGS:
            return self._withdraw_savings(amount)
        if self.kind == AccountKind.CURRENT:
            return self._withdraw_current(amount)
        return self._withdraw_default(amount)

    def _withdraw_default(self, amount: Decimal) -> OperationResult:
        if amount <= ZERO:
            return self._reject("withdraw", WITHDRAW_REJECTED, amount, RejectionReason.INVALID_AMOUNT)
        if amount > self.balance:
            return self._reject("withdraw", WITHDRAW_REJECTED, amount, RejectionReason.INSUFFICIENT_FUNDS)
        return self._debit(amount)

    def _withdraw_savings(self, amount: Decimal) -> OperationResult:
        if amount > self.balance:
            return self._reject("withdraw", SAVINGS_OVERDRAW_REJECTED, amount,
                                RejectionReason.SAVINGS_OVERDRAW)
        return self._withdraw_default(amount)

    def _withdraw_current(self, amount: Decimal) -> OperationResult:
        if amount <= ZERO:
            return self._reject("withdraw", OVERDRAFT_REJECTED, amount, RejectionReason.INVALID_AMOUNT)
        if self.balance - amount < -self.overdraft_limit:
            return self._reject("withdraw", OVERDRAFT_REJECTED, amount,
                                RejectionReason.OVERDRAFT_LIMIT_EXCEEDED)
        return self._debit(amount)

    def _debit(self, amount: Decimal) -> OperationResult:
        self._set_balance(self.balance - amount)
        return self._accept(
            "withdraw",
            f"{self._fmt(amount)} withdrawn successfully. Current balance: {self._fmt(self.balance)}",
            amount,
        )

    def check_balance(self) -> OperationResult:
        """Report the current balance"""
        return self._accept("check_balance", f"Account Balance: {self._fmt(self.balance)}")

    def add_interest(self) -> OperationResult:
        """
        Credit interest on the current balance (savings accounts only)

        interest = balance * interest_rate / 100, credited unrounded; only
        the message rounds it for display. There is no accrual period; every
        call applies the full rate once.

        Raises:
            TypeError: If the account is not a savings account
        """
        if not self.is_savings:
            raise TypeError(f"Interest only applies to savings accounts, not {self.kind.value}")

        interest = self.balance * self.interest_rate / Decimal('100')
        self._set_balance(self.balance + interest)
        return self._accept(
            "add_interest",
            f"Interest of {self._fmt(interest)} added. Current balance: {self._fmt(self.balance)}",
            interest,
        )


def open_account(account_number: str, holder_name: str,
                 initial_balance: AmountLike = ZERO) -> Account:
    """Open an account with the default withdrawal policy"""
    return Account(
        account_number=account_number,
        holder_name=holder_name,
        balance=initial_balance,
    )


def open_savings_account(account_number: str, holder_name: str,
                         initial_balance: AmountLike, interest_rate: AmountLike) -> Account:
    """
    Open a savings account

    Args:
        account_number: Account identifier
        holder_name: Display name of the holder
        initial_balance: Opening balance, must not be negative
        interest_rate: Percentage applied by add_interest (3.5 means 3.5%)
    """
    return Account(
        account_number=account_number,
        holder_name=holder_name,
        balance=initial_balance,
        kind=AccountKind.SAVINGS,
        interest_rate=interest_rate,
    )


def open_current_account(account_number: str, holder_name: str,
                         initial_balance: AmountLike, overdraft_limit: AmountLike) -> Account:
    """
    Open a current account

    Args:
        account_number: Account identifier
        holder_name: Display name of the holder
        initial_balance: Opening balance, must not be negative
        overdraft_limit: How far below zero the balance may go
    """
    return Account(
        account_number=account_number,
        holder_name=holder_name,
        balance=initial_balance,
        kind=AccountKind.CURRENT,
        overdraft_limit=overdraft_limit,
    )
