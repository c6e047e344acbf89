from pydantic import BaseModel, ConfigDict


class SelectOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int
    label: str
