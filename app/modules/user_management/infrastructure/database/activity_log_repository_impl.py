# 📄 File: app/modules/user_management/infrastructure/database/activity_log_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Writes diary entries about what users and admins did, and reads the latest ones back.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the append-only ActivityLogRepository.
#
# 🔗 Dependencies:
# - SQLAlchemy async session
# - ActivityLogModel, ActivityLog domain model
#
# 🔄 Connected Modules / Calls From:
# - Onboarding submission service, directory/billing admin services, admin dashboard

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.activity_log import ActivityLog
from app.modules.user_management.domain.repositories.activity_log_repository import (
    ActivityLogRepository,
)
from app.modules.user_management.infrastructure.database.models import ActivityLogModel
from app.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class ActivityLogRepositoryImpl(ActivityLogRepository):
    """SQLAlchemy implementation of the audit trail repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def append(self, entry: ActivityLog) -> ActivityLog:
        try:
            model = ActivityLogModel(
                id=entry.id,
                user_id=entry.user_id,
                action=entry.action,
                entity_type=entry.entity_type,
                entity_id=entry.entity_id,
                metadata_=entry.metadata or {},
                created_at=entry.created_at,
            )
            # Own savepoint; the request transaction survives a failed insert
            async with self._session.begin_nested():
                self._session.add(model)

            logger.debug(f"Recorded activity {entry.action} for {entry.entity_type}:{entry.entity_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error recording activity {entry.action}: {str(e)}")
            raise RepositoryError(
                f"Failed to record activity: {str(e)}",
                operation="append",
                entity="activity_log"
            ) from e

    async def list_recent(self, limit: int = 10) -> List[ActivityLog]:
        try:
            stmt = (
                select(ActivityLogModel)
                .order_by(ActivityLogModel.created_at.desc())
                .limit(limit)
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing activity: {str(e)}")
            raise RepositoryError(
                f"Failed to list activity: {str(e)}",
                operation="list_recent",
                entity="activity_log"
            ) from e

    def _model_to_domain(self, model: ActivityLogModel) -> ActivityLog:
        return ActivityLog(
            id=str(model.id),
            user_id=str(model.user_id) if model.user_id else None,
            action=model.action,
            entity_type=model.entity_type,
            entity_id=model.entity_id,
            metadata=model.metadata_ or {},
            created_at=model.created_at,
        )
