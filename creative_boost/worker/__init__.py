"""Background workers for the Creative Boost service"""
from .engagement_sync import EngagementSyncWorker

__all__ = ["EngagementSyncWorker"]
