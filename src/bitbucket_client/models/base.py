"""Shared base for Bitbucket records."""

from pydantic import BaseModel, ConfigDict


class BitbucketModel(BaseModel):
    """Plain record mirroring a Bitbucket JSON object.

    Every field is optional and unknown keys are kept, so partial responses
    and fields added later by the API still round-trip.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict:
        """Serialize for a POST/PUT body with only the fields the caller set."""
        return self.model_dump(mode="json", exclude_unset=True, by_alias=True)
