"""Profile maintenance: user information and role changes."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from groove.domain import groove
from groove.identity.account.account import Account, AccountRole


@groove.command(part_of="Account")
class UpdateUserInformation:
    account_id = Identifier(required=True)
    street = String(max_length=255)
    city = String(max_length=100)
    postal_code = String(max_length=20)
    country = String(max_length=100)


@groove.command(part_of="Account")
class ChangeAccountRole:
    """Switch the account to the artist or studio role after onboarding."""

    account_id = Identifier(required=True)
    role = String(required=True, choices=AccountRole)


@groove.command_handler(part_of=Account)
class AccountInformationHandler:
    @handle(UpdateUserInformation)
    def update_user_information(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.update_user_information(
            street=command.street,
            city=command.city,
            postal_code=command.postal_code,
            country=command.country,
        )
        repo.add(account)

    @handle(ChangeAccountRole)
    def change_account_role(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.change_role(command.role)
        repo.add(account)
