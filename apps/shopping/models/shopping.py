from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class FieldName(str, Enum):
    QUANTITY = "quantity"
    PRICE = "price"
    TAX = "tax"
    DISCOUNT = "discount"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ShoppingInputs(BaseModel):
    """Raw strings exactly as the user typed them. Missing keys become ""."""
    quantity: str = ""
    price: str = ""
    tax: str = ""
    discount: str = ""

    def as_mapping(self) -> Dict[FieldName, str]:
        return {name: getattr(self, name.value) for name in FieldName}


class RenderedField(BaseModel):
    value: str
    message: Optional[str] = None
    has_error: bool = False

    @property
    def css_class(self) -> Optional[str]:
        return "error" if self.has_error else None


class ShoppingPage(BaseModel):
    # insertion order follows FieldName declaration order
    fields: Dict[FieldName, RenderedField] = Field(default_factory=dict)
    total: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return any(f.has_error for f in self.fields.values())
