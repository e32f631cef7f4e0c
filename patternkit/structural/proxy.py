"""Proxy - access control and auditing in front of a bank account."""

from typing import Iterable, List, Optional, Tuple, Union

from patternkit.domain.core.common_types import BankAccount
from patternkit.domain.core.results import AccessDenied, Result
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class AccountProxy:
    """
    Same interface as BankAccount, guarded by a principal check.

    Authorized calls return the subject's exact result. Unauthorized calls
    return AccessDenied without reaching the subject. Every call is recorded
    in ``audit_log`` as ``(principal, operation, allowed)``.
    """

    def __init__(
        self,
        account: BankAccount,
        principal: str,
        authorized: Optional[Iterable[str]] = None,
    ):
        self._account = account
        self.principal = principal
        # The owner is always authorized
        self._authorized = set(authorized or ()) | {account.owner}
        self.audit_log: List[Tuple[str, str, bool]] = []

    def _allowed(self, operation: str) -> bool:
        allowed = self.principal in self._authorized
        self.audit_log.append((self.principal, operation, allowed))
        if not allowed:
            logger.warning(
                f"Denied {operation} on account of '{self._account.owner}' to '{self.principal}'"
            )
        return allowed

    @property
    def balance(self) -> Union[float, AccessDenied]:
        if not self._allowed("balance"):
            return AccessDenied(self.principal, "balance")
        return self._account.balance

    def deposit(self, amount: float) -> Union[float, AccessDenied]:
        if not self._allowed("deposit"):
            return AccessDenied(self.principal, "deposit")
        new_balance = self._account.deposit(amount)
        logger.debug(f"'{self.principal}' deposited {amount}")
        return new_balance

    def withdraw(self, amount: float) -> Result:
        if not self._allowed("withdraw"):
            return AccessDenied(self.principal, "withdraw")
        result = self._account.withdraw(amount)
        logger.debug(f"'{self.principal}' withdrew {amount}: {result}")
        return result
