from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def _attribute(xml_name: str, camel_name: str, **kwargs):
    """Field read from a tf XML attribute and written out under its camel-style name"""
    return Field(
        validation_alias=AliasChoices(xml_name, camel_name),
        serialization_alias=camel_name,
        **kwargs,
    )


class PendingChange(BaseModel):
    """Represents one item reported by `tf status`, pending or candidate"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    server_item: Optional[str] = _attribute("server-item", "serverItem", default=None)
    local_item: str = _attribute("local-item", "localItem")
    change_type: str = _attribute("change-type", "changeType")
    version: Optional[str] = _attribute("version", "version", default=None)
    owner: Optional[str] = _attribute("owner", "owner", default=None)
    date: Optional[str] = _attribute("date", "date", default=None)
    lock: Optional[str] = _attribute("lock", "lock", default=None)
    workspace: Optional[str] = _attribute("workspace", "workspace", default=None)
    computer: Optional[str] = _attribute("computer", "computer", default=None)
    source_item: Optional[str] = _attribute("source-item", "sourceItem", default=None)  # Renames and branches only
    file_type: Optional[str] = _attribute("file-type", "fileType", default=None)
    is_candidate: bool = Field(default=False, serialization_alias="isCandidate")
