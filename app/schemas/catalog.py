from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Literal, Union

FacetType = Literal["select", "multiselect", "range"]


class ResourceConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    table: str
    id_field: str = "Id"
    searchable_fields: List[str] = []
    filterable_fields: List[str] = []
    range_fields: List[str] = []
    single_select_fields: List[str] = []
    sortable_fields: List[str] = []
    # URL-safe parameter name -> raw field label
    param_aliases: Dict[str, str] = {}

    @model_validator(mode="after")
    def _check_declared_fields(self):
        for list_name in ("searchable_fields", "filterable_fields", "range_fields", "single_select_fields", "sortable_fields"):
            fields = getattr(self, list_name)
            repeated = sorted({f for f in fields if fields.count(f) > 1})
            if repeated:
                raise ValueError(f"{list_name} declares a field more than once: {repeated}")
        unknown = [f for f in self.single_select_fields if f not in self.filterable_fields]
        if unknown:
            raise ValueError(f"single_select_fields not declared as filterable: {unknown}")
        targets = set(self.filterable_fields) | set(self.range_fields)
        dangling = sorted(alias for alias, field in self.param_aliases.items() if field not in targets)
        if dangling:
            raise ValueError(f"param_aliases point at undeclared fields: {dangling}")
        return self

    @property
    def known_fields(self) -> List[str]:
        ordered: List[str] = []
        for field in [
            self.id_field,
            *self.searchable_fields,
            *self.filterable_fields,
            *self.range_fields,
            *self.sortable_fields,
        ]:
            if field not in ordered:
                ordered.append(field)
        return ordered

    def aliases_for(self, field: str) -> List[str]:
        return [alias for alias, target in self.param_aliases.items() if target == field]


class OptionCount(BaseModel):
    value: Union[str, float, int]
    count: int = Field(ge=0)


class FacetDescriptor(BaseModel):
    type: FacetType
    options: List[Any] | None = None
    optionsWithCounts: List[OptionCount] | None = None
    min: float | None = None
    max: float | None = None
    step: float | None = None


class ResourceSummary(BaseModel):
    name: str
    id_field: str
    searchable_fields: List[str]
    filterable_fields: List[str]
    range_fields: List[str]
