"""Account registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from groove.config import get_settings
from groove.domain import groove
from groove.identity.account.account import Account, AccountRole
from groove.utils.logging import get_logger

logger = get_logger(__name__)


@groove.command(part_of="Account")
class RegisterAccount:
    """Create a new account with the configured starting balance."""

    email: String(required=True, max_length=254)
    display_name: String(required=True, max_length=100)
    role: String(choices=AccountRole, default=AccountRole.LISTENER.value)


@groove.command_handler(part_of=Account)
class RegisterAccountHandler:
    @handle(RegisterAccount)
    def register_account(self, command):
        repo = current_domain.repository_for(Account)
        email = command.email.strip().lower()

        if repo._dao.query.filter(email=email).all().items:
            raise ValidationError({"email": ["Email is already registered"]})

        account = Account.register(
            email=email,
            display_name=command.display_name,
            role=command.role,
            starting_balance=get_settings().starting_balance,
        )
        repo.add(account)

        logger.info("Account registered", account_id=str(account.id), role=account.role)
        return str(account.id)
