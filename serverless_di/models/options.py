"""
Write options for table clients.

``TableOptions`` is the fully-populated set a client holds after ``init``;
``PutAllOptions`` carries per-call overrides where ``None`` means "use the
client default".
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReturnConsumedCapacity(str, Enum):
    """Consumed capacity reporting level for write requests."""
    INDEXES = "INDEXES"
    TOTAL = "TOTAL"
    NONE = "NONE"


class ReturnItemCollectionMetrics(str, Enum):
    """Item collection metrics reporting for write requests."""
    SIZE = "SIZE"
    NONE = "NONE"


class ReturnValues(str, Enum):
    """Attribute values returned by single-item writes."""
    NONE = "NONE"
    ALL_OLD = "ALL_OLD"
    UPDATED_OLD = "UPDATED_OLD"
    ALL_NEW = "ALL_NEW"
    UPDATED_NEW = "UPDATED_NEW"


class TableOptions(BaseModel):
    """Table-level write behaviour. Every field always has a value."""

    strict: bool = Field(False, description="Reject a whole batch if any item lacks a primary key")
    return_consumed_capacity: ReturnConsumedCapacity = Field(
        ReturnConsumedCapacity.TOTAL, alias="returnConsumedCapacity"
    )
    return_item_collection_metrics: ReturnItemCollectionMetrics = Field(
        ReturnItemCollectionMetrics.NONE, alias="returnItemCollectionMetrics"
    )
    return_values: ReturnValues = Field(ReturnValues.ALL_NEW, alias="returnValues")

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, validate_default=True)


class PutAllOptions(BaseModel):
    """Per-call overrides for ``TableClient.put_all``."""

    strict: Optional[bool] = None
    return_consumed_capacity: Optional[ReturnConsumedCapacity] = Field(None, alias="returnConsumedCapacity")
    return_item_collection_metrics: Optional[ReturnItemCollectionMetrics] = Field(
        None, alias="returnItemCollectionMetrics"
    )
    return_values: Optional[ReturnValues] = Field(None, alias="returnValues")

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    def resolve(self, defaults: TableOptions) -> TableOptions:
        """Merge these overrides over ``defaults``; explicit values win, including ``False``."""
        overrides = self.model_dump(exclude_none=True)
        return defaults.model_copy(update=overrides)
