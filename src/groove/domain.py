"""The groove domain.

One Protean domain hosts every bounded context of the marketplace
(identity, catalogue, ordering, payments). ``groove.init()`` walks this
package and registers the aggregates, commands and handlers it finds.
"""

from protean.domain import Domain

from groove.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

groove = Domain(name="groove")
