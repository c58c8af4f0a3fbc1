from __future__ import annotations

from typing import Sequence

import polars as pl

from storefinder.schemas.stores import StoreRecord, TagFacets


def get_tag_facets(records: Sequence[StoreRecord]) -> TagFacets:
    """
    Distinct tags across the directory, for building filter controls.

    Tags differing only in case collapse to the first spelling seen.
    """
    tags = [tag for record in records for tag in record.tags]
    df = pl.DataFrame({"tag": tags}, schema={"tag": pl.Utf8})

    unique_tags = (
        df.with_columns(pl.col("tag").str.to_lowercase().alias("tag_lower"))
        .unique(subset=["tag_lower"], keep="first", maintain_order=True)
        .sort("tag_lower")
        .get_column("tag")
        .to_list()
    )

    return TagFacets(tags=unique_tags, total_stores=len(records))
