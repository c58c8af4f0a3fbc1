from __future__ import annotations

from typing import List, Sequence

import polars as pl

from storefinder.schemas.stores import QuerySpec, StoreRecord


_STORE_SCHEMA = {
    "name": pl.Utf8,
    "address": pl.Utf8,
    "description": pl.Utf8,
    "tags": pl.List(pl.Utf8),
}


def _stores_frame(records: Sequence[StoreRecord]) -> pl.DataFrame:
    """Lower-cased view of the searchable fields, one row per record position."""
    df = pl.DataFrame(
        {
            "name": [r.name for r in records],
            "address": [r.address for r in records],
            "description": [r.description for r in records],
            "tags": [list(r.tags) for r in records],
        },
        schema=_STORE_SCHEMA,
    )
    return df.with_row_index("position").with_columns(
        [
            pl.col("name").str.to_lowercase().alias("name_lower"),
            pl.col("address").str.to_lowercase().alias("address_lower"),
            pl.col("description").fill_null("").str.to_lowercase().alias("description_lower"),
            pl.col("tags").list.eval(pl.element().str.to_lowercase()).alias("tags_lower"),
        ]
    )


def _search_match(term: str) -> pl.Expr:
    tag_hit = (
        pl.col("tags_lower")
        .list.eval(pl.element().str.contains(term, literal=True))
        .list.any()
        .fill_null(False)
    )
    return (
        pl.col("name_lower").str.contains(term, literal=True)
        | pl.col("address_lower").str.contains(term, literal=True)
        | pl.col("description_lower").str.contains(term, literal=True)
        | tag_hit
    )


def filter_stores(
    records: Sequence[StoreRecord],
    query: QuerySpec,
) -> List[StoreRecord]:
    """
    Return the records matching every active criterion, in their original order.

    Criteria:
    - culture, dietary and product labels (each label must be among the tags)
    - search term (substring of name, address, description or any tag)
    """
    records = list(records)
    if not records or query.is_empty():
        return records

    mask = pl.lit(True)

    # Category filters: every requested label must be present, across all categories.
    for label in query.required_labels():
        mask = mask & pl.col("tags_lower").list.contains(pl.lit(label)).fill_null(False)

    if query.search_term:
        mask = mask & _search_match(query.search_term)

    positions = _stores_frame(records).filter(mask).get_column("position").to_list()
    return [records[i] for i in positions]
