"""Review Ledger bounded context — one review per user per location.

Accepts or rejects review submissions and updates against the user and
location registries, keeps the per-(user, location) index and the review
id counter consistent, and holds the write-once authority configuration.
"""

from protean.domain import Domain

from ledger.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="ledger")

logger = get_logger(__name__)

# Domain Composition Root
ledger = Domain(name="ledger")
