from datetime import datetime, timezone
from typing import Optional

import attrs


@attrs.define
class UserSessionEntity:
    """Server-side record of one login; deleting it ends the session."""

    id: str
    user_id: int
    expires_at: datetime
    created_at: Optional[datetime] = None

    def is_active(self, now: datetime) -> bool:
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at > now
