######################################
# --- Externally visible records --- #
######################################

from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with microsecond precision, e.g. `2024-01-01T00:00:00.000000+00:00`."""
    return value.isoformat(timespec="microseconds")


class EntryRecord(BaseModel):
    """Fields shared by every record."""
    id: str = Field(description="Unique id of the entry.")
    name: str = Field(description="Name of the entry. Not unique within a folder.")
    parent_id: Optional[str] = Field(description="Id of the containing folder, `None` for the root.")
    created_at: str = Field(description="Creation time, ISO-8601.")
    modified_at: str = Field(description="Last modification time, ISO-8601.")

    model_config = ConfigDict(frozen=True)


class FileRecord(EntryRecord):
    """Record of a file."""
    type: Literal["file"] = "file"
    size: int = Field(ge=0, description="Content size in bytes.")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "3",
                "name": "foo.txt",
                "type": "file",
                "parent_id": "0",
                "created_at": "2024-01-01T00:00:00.000000+00:00",
                "modified_at": "2024-01-01T00:00:00.000000+00:00",
                "size": 13,
            }
        },
    )


class FolderMiniRecord(EntryRecord):
    """Record of a folder without its children, used inside `FolderRecord.entries`."""
    type: Literal["folder"] = "folder"


ChildRecord = Annotated[Union[FileRecord, FolderMiniRecord], Field(discriminator="type")]


class FolderRecord(FolderMiniRecord):
    """Record of a folder with a one-level listing of its children."""
    entries: List[ChildRecord] = Field(default_factory=list)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "docs",
                "type": "folder",
                "parent_id": "0",
                "created_at": "2024-01-01T00:00:00.000000+00:00",
                "modified_at": "2024-01-01T00:00:01.000000+00:00",
                "entries": [
                    {
                        "id": "2",
                        "name": "readme.txt",
                        "type": "file",
                        "parent_id": "1",
                        "created_at": "2024-01-01T00:00:01.000000+00:00",
                        "modified_at": "2024-01-01T00:00:01.000000+00:00",
                        "size": 0,
                    }
                ],
            }
        },
    )
