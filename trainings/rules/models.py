from pydantic import BaseModel, Field


class TrainingRules(BaseModel):
    capacity_min: int = Field(default=1, ge=1)
    price_min: int = Field(default=0, ge=0)


class CancellationRules(BaseModel):
    reason_min_length: int = Field(default=5, ge=1)


class Rules(BaseModel):
    training: TrainingRules = Field(default_factory=TrainingRules)
    cancellation: CancellationRules = Field(default_factory=CancellationRules)


def default_rules() -> Rules:
    return Rules()
