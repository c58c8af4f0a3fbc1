from __future__ import annotations
from pydantic import BaseModel
from typing import Dict

from storefinder.services.store_loader import StoreDataError, load_stores


class DependencyStatus(BaseModel):
    status: str
    details: str | None = None


class ReadinessResponse(BaseModel):
    status: str
    dependencies: Dict[str, DependencyStatus]


def check_store_data_status() -> DependencyStatus:
    try:
        stores = load_stores()
    except StoreDataError as e:
        return DependencyStatus(status="error", details=e.detail)
    if not stores:
        return DependencyStatus(status="warning", details="Store document is empty")
    return DependencyStatus(status="ok", details=f"Store document loaded with {len(stores)} stores")


def run_readiness_check() -> ReadinessResponse:
    store_status = check_store_data_status()

    total_status = "ready"
    if store_status.status == "error":
        total_status = "not_ready"

    return ReadinessResponse(
        status=total_status,
        dependencies={"store_data": store_status},
    )
