from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


def _split_labels(raw: Optional[str]) -> Tuple[str, ...]:
    # Empty tokens from stray commas are kept: "african," requires an empty tag.
    if not raw:
        return ()
    labels = (token.strip().lower() for token in raw.split(","))
    return tuple(dict.fromkeys(labels))


class StoreRecord(BaseModel):
    """
    One entry of the store directory.

    Attributes beyond the four known ones are kept as-is so that the API can
    hand every store back exactly as it appears in the source document.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    address: str
    description: Optional[str] = None
    tags: List[str]

    _source_keys: Tuple[str, ...] = PrivateAttr(default=())

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler) -> "StoreRecord":
        record = handler(data)
        if isinstance(data, dict):
            record._source_keys = tuple(data)
        return record

    def to_public_dict(self) -> Dict[str, Any]:
        """Source fields only, in the order the source document listed them."""
        dumped = self.model_dump(exclude_unset=True)
        ordered = {key: dumped[key] for key in self._source_keys if key in dumped}
        ordered.update(dumped)
        return ordered


class QuerySpec(BaseModel):
    """Canonical, already-normalized filter criteria for one request."""

    model_config = ConfigDict(frozen=True)

    culture_filters: Tuple[str, ...] = Field(
        default=(),
        description="Lower-cased culture labels; a store must carry all of them.",
    )
    dietary_filters: Tuple[str, ...] = Field(
        default=(),
        description="Lower-cased dietary labels; a store must carry all of them.",
    )
    product_filters: Tuple[str, ...] = Field(
        default=(),
        description="Lower-cased product labels; a store must carry all of them.",
    )
    search_term: str = Field(
        default="",
        description="Lower-cased substring matched against name, address, description and tags.",
    )

    @classmethod
    def from_params(
        cls,
        culture: Optional[str] = None,
        dietary: Optional[str] = None,
        product: Optional[str] = None,
        search: Optional[str] = None,
    ) -> "QuerySpec":
        """Build a query from raw comma-separated request parameters."""
        return cls(
            culture_filters=_split_labels(culture),
            dietary_filters=_split_labels(dietary),
            product_filters=_split_labels(product),
            search_term=search.lower() if search else "",
        )

    def is_empty(self) -> bool:
        return not (
            self.culture_filters
            or self.dietary_filters
            or self.product_filters
            or self.search_term
        )

    def required_labels(self) -> Tuple[str, ...]:
        """All category labels, in culture/dietary/product order."""
        return self.culture_filters + self.dietary_filters + self.product_filters


class TagFacets(BaseModel):
    tags: List[str] = Field(default_factory=list)
    total_stores: int


class ErrorResponse(BaseModel):
    error: str
