"""API dependency helpers and service providers."""

from fastapi import Depends, Request

from calles.core.config import Settings
from calles.services.loader import DatasetHolder, StreetMap

__all__ = ["get_dataset_holder", "get_settings", "get_street_map"]


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_dataset_holder(request: Request) -> DatasetHolder:
    return request.app.state.dataset


def get_street_map(holder: DatasetHolder = Depends(get_dataset_holder)) -> StreetMap:
    # Empty map while loading or after a failed load.
    return holder.street_map
