from protean.utils.globals import current_domain

from groove.ordering.cart.cart import CartStatus, ShoppingCart


def find_active_cart(account_id):
    """Return the account's active cart, or None when it has not started one."""
    results = (
        current_domain.repository_for(ShoppingCart)
        ._dao.query.filter(account_id=str(account_id), status=CartStatus.ACTIVE.value)
        .all()
    )
    if not results or not results.items:
        return None
    return results.first
