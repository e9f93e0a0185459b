# 📄 File: app/modules/user_management/domain/services/activity_recorder.py
# 🧭 Purpose (Layman Explanation):
# A small helper that writes "who did what" diary entries after something changes,
# without letting a diary hiccup undo the change itself.
# 🧪 Purpose (Technical Summary):
# Wraps ActivityLogRepository.append; repository failures are logged and reported as
# a None result instead of propagating, since the audit trail is best-effort.
# 🔗 Dependencies:
# ActivityLogRepository, ActivityLog, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# Onboarding submission service, directory service, billing admin service, admin profile updates

from typing import Any, Dict, Optional

from app.modules.user_management.domain.models.activity_log import ActivityLog
from app.modules.user_management.domain.repositories.activity_log_repository import (
    ActivityLogRepository,
)
from app.shared.core.exceptions import RepositoryError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class ActivityRecorder:
    """Best-effort writer for the audit trail."""

    def __init__(self, repository: Optional[ActivityLogRepository]):
        self.repository = repository

    async def record(
        self,
        action: str,
        user_id: Optional[str],
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> Optional[ActivityLog]:
        """
        Append an audit entry.

        Returns:
            The stored entry, or None when no repository is configured or the write failed
        """
        logger.log_user_action(
            action=action,
            user_id=user_id or "anonymous",
            resource=f"{entity_type}:{entity_id}" if entity_type else None,
        )

        if self.repository is None:
            return None

        entry = ActivityLog(
            user_id=user_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            metadata=metadata or {},
        )
        try:
            return await self.repository.append(entry)
        except RepositoryError as e:
            logger.warning(
                f"Could not record activity {action}: {e.message}",
                extra={'action': action, 'entity_id': entity_id}
            )
            return None
