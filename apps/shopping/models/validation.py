from typing import Dict, List, Optional
from pydantic import BaseModel, Field

class ValidationIssue(BaseModel):
    field: str          # e.g. "quantity" or "price"
    code: str           # e.g. "NOT_A_NUMBER"
    message: str        # human-readable explanation shown next to the field

class ValidationReport(BaseModel):
    errors: List[ValidationIssue] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def errors_by_field(self) -> Optional[Dict[str, List[str]]]:
        """
        Group messages per field, keeping the order the rules produced them.
        Returns None when every field passed.
        """
        if not self.errors:
            return None
        grouped: Dict[str, List[str]] = {}
        for issue in self.errors:
            grouped.setdefault(issue.field, []).append(issue.message)
        return grouped
