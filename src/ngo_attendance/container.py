from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .participants.kv_participant_repository import KVParticipantRepository
from .participants.service import ParticipantService
from .reports.service import ReportService
from .sessions.kv_session_repository import KVSessionRepository
from .sessions.service import SessionService
from .storage.connection import KeyValueStorage, StorageConfig, open_storage
from .storage.warnings import PersistenceWarnings


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage

    participants_repo: KVParticipantRepository
    sessions_repo: KVSessionRepository
    warnings: PersistenceWarnings

    participant_service: ParticipantService
    session_service: SessionService
    report_service: ReportService


def build_container(*, storage_config: Optional[dict] = None, storage: Optional[KeyValueStorage] = None) -> Container:
    """Wire repositories and services, then load both collections once."""

    if storage is None:
        cfg = dict(storage_config or {"backend": "memory"})
        quota = cfg.get("quota_bytes")
        storage = open_storage(
            StorageConfig(
                backend=str(cfg.get("backend", "file")),
                directory=cfg.get("directory"),
                quota_bytes=int(quota) if quota else None,
            )
        )

    participants_repo = KVParticipantRepository(storage)
    sessions_repo = KVSessionRepository(storage)
    warnings = PersistenceWarnings()

    participant_service = ParticipantService(participants_repo, warnings=warnings)
    session_service = SessionService(sessions_repo, warnings=warnings)
    report_service = ReportService()

    participant_service.load()
    session_service.load()

    return Container(
        storage=storage,
        participants_repo=participants_repo,
        sessions_repo=sessions_repo,
        warnings=warnings,
        participant_service=participant_service,
        session_service=session_service,
        report_service=report_service,
    )
