from pydantic import BaseModel, ConfigDict, Field, computed_field


class IndexingOutcome(BaseModel):
    """A DTO describing how many documents of one request reached the store."""

    model_config = ConfigDict(frozen=True)

    collection: str
    total: int = Field(ge=0)
    success_count: int = Field(ge=0)
    bulk_succeeded: bool = False

    @computed_field
    @property
    def failure_count(self) -> int:
        return self.total - self.success_count
