"""Raw host record models as they appear in the settings file."""

from pydantic import BaseModel, ConfigDict, Field


class FolderConfig(BaseModel):
    """Folder entry given as an object."""

    model_config = ConfigDict(extra="ignore")

    name: str
    path: str


class HostConfig(BaseModel):
    """One entry of the ``remote.OSS.hosts`` list."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str
    name: str = Field(min_length=1)
    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535, strict=True)
    connection_token: bool | str | None = Field(default=None, alias="connectionToken")
    folders: list[str | FolderConfig] | None = None
