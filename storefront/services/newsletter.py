from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from storefront.catalog.repository import CatalogRepository
from storefront.errors import AlreadySubscribed
from storefront.models import Subscriber
from storefront.utils.validators import normalize_email

log = logging.getLogger(__name__)


def subscribe(repo: CatalogRepository, email: Any) -> Subscriber:
    email = normalize_email(email)
    if repo.get_subscriber_by_email(email):
        raise AlreadySubscribed(email)

    now = datetime.now(timezone.utc).isoformat()
    sub = repo.create_subscriber(email, subscribed_at=now)
    log.info("newsletter subscriber #%d added", sub.id)
    return sub
