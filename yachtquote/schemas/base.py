from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContractModel(BaseModel):
    """Wire names are camelCase; snake_case attribute names are accepted too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenContractModel(ContractModel):

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
