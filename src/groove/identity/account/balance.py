"""Wallet balance movements: credits from top-ups, debits from balance checkout."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from groove.domain import groove
from groove.identity.account.account import Account


@groove.command(part_of="Account")
class CreditBalance:
    account_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.01)
    reference = String(max_length=255)


@groove.command(part_of="Account")
class DebitBalance:
    account_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.01)
    reference = String(max_length=255)


@groove.command_handler(part_of=Account)
class AccountBalanceHandler:
    @handle(CreditBalance)
    def credit_balance(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.credit(command.amount, reference=command.reference)
        repo.add(account)
        return account.balance

    @handle(DebitBalance)
    def debit_balance(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.debit(command.amount, reference=command.reference)
        repo.add(account)
        return account.balance
