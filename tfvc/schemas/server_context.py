from typing import Optional

from pydantic import BaseModel, ConfigDict, SecretStr


class ServerContext(BaseModel):
    """Team Foundation Server collection and the credentials used to reach it"""
    model_config = ConfigDict(frozen=True)

    collection_url: str
    username: Optional[str] = None
    password: Optional[SecretStr] = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.username)
