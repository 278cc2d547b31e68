from pydantic import BaseModel


class WireModel(BaseModel):
    """Immutable base for values decoded from the analysis service."""

    model_config = {"frozen": True}
