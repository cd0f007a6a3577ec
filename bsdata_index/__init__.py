"""Index builder for BattleScribe data repositories."""

from bsdata_index.indexing.pipeline import RepositoryData, create_repository_data

__all__ = ["RepositoryData", "create_repository_data"]
